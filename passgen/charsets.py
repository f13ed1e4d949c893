"""
Character classes and their fixed alphabets.
"""

from enum import Enum


class CharacterClass(Enum):
    """Character classes a password may be composed of, in processing order."""

    UPPER_CASE = "upper-case"
    LOWER_CASE = "lower-case"
    DIGIT = "digits"
    PUNCTUATION = "punctuation"

    @property
    def alphabet(self) -> str:
        return ALPHABETS[self]

    @property
    def label(self) -> str:
        return self.value.replace("-", " ")


ALPHABETS = {
    CharacterClass.UPPER_CASE: "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    CharacterClass.LOWER_CASE: "abcdefghijklmnopqrstuvwxyz",
    CharacterClass.DIGIT: "1234567890",
    CharacterClass.PUNCTUATION: "`~!@#$%&*()-_+={}[]\\:;,./?",
}

# Visually confusable characters, excluded unless explicitly allowed
AMBIGUOUS_CHARS = frozenset("O0l1")


def is_ambiguous(char: str) -> bool:
    """Return True if the character is visually ambiguous."""
    return char in AMBIGUOUS_CHARS


def strip_ambiguous(chars: str) -> str:
    """Remove ambiguous characters, keeping the order of the rest."""
    return "".join(c for c in chars if c not in AMBIGUOUS_CHARS)
