"""
Shared fixtures for passgen tests.
"""

import pytest


class ScriptedRandomSource:
    """Replays a fixed list of integers and records the bounds requested."""

    def __init__(self, values):
        self.values = list(values)
        self.bounds = []

    def next_int(self, bound: int) -> int:
        self.bounds.append(bound)
        value = self.values.pop(0)
        assert 0 <= value < bound, f"scripted value {value} outside [0, {bound})"
        return value


@pytest.fixture
def scripted():
    """Factory for scripted random sources."""
    return ScriptedRandomSource
