"""
Password composition policy and its builder.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, FrozenSet, Optional, Tuple

from .charsets import AMBIGUOUS_CHARS, CharacterClass, strip_ambiguous
from .exceptions import ConfigurationError
from .random_source import RandomSource

if TYPE_CHECKING:
    from .generator import Generator


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Policy:
    """Validated, immutable password composition rules.

    :class:`PolicyBuilder` is the usual way to create one. Direct
    construction is validated the same way: every required class must be
    allowed and ``pool`` must be a non-empty selection from the allowed
    alphabets, free of ambiguous characters unless they are allowed.

    Raises:
        ConfigurationError: If the fields are inconsistent
    """

    allowed: FrozenSet[CharacterClass]
    required: FrozenSet[CharacterClass]
    ambiguous_allowed: bool
    pool: str

    def __post_init__(self):
        object.__setattr__(self, "allowed", frozenset(CharacterClass(c) for c in self.allowed))
        object.__setattr__(self, "required", frozenset(CharacterClass(c) for c in self.required))

        for char_class in CharacterClass:
            if char_class in self.required and char_class not in self.allowed:
                raise ConfigurationError(
                    f"{char_class.label.capitalize()} cannot be required when it is not allowed",
                    char_class=char_class,
                )

        if not self.pool:
            raise ConfigurationError("At least one character class must be allowed")

        permitted = set("".join(c.alphabet for c in self.allowed))
        if not self.ambiguous_allowed:
            permitted -= AMBIGUOUS_CHARS
        stray = set(self.pool) - permitted
        if stray:
            raise ConfigurationError(
                f"Pool contains characters outside the allowed classes: {''.join(sorted(stray))}"
            )

    @property
    def required_classes(self) -> Tuple[CharacterClass, ...]:
        """Required classes in processing order."""
        return tuple(c for c in CharacterClass if c in self.required)

    @property
    def allowed_classes(self) -> Tuple[CharacterClass, ...]:
        """Allowed classes in processing order."""
        return tuple(c for c in CharacterClass if c in self.allowed)

    @property
    def minimum_length(self) -> int:
        """Shortest length that can hold one character per required class."""
        return len(self.required)

    def describe(self) -> str:
        """
        Get human-readable description of the policy.

        Returns:
            Description of allowed classes, required ones marked with ``*``
        """
        parts = []
        for char_class in self.allowed_classes:
            label = char_class.label
            if char_class in self.required:
                label += "*"
            parts.append(label)

        info = ", ".join(parts)

        if not self.ambiguous_allowed:
            info += " (excluding ambiguous chars)"

        return info


class PolicyBuilder:
    """Collect allow/require flags and materialize a :class:`Policy`.

    Every class is allowed and none is required by default; ambiguous
    characters are excluded by default. Setters return the builder so
    calls can be chained::

        generator = (PolicyBuilder()
                     .set_required(CharacterClass.DIGIT)
                     .set_allowed(CharacterClass.PUNCTUATION, False)
                     .build())
    """

    def __init__(self):
        self._allowed: Dict[CharacterClass, bool] = {c: True for c in CharacterClass}
        self._required: Dict[CharacterClass, bool] = {c: False for c in CharacterClass}
        self._ambiguous_allowed = False
        self._random_source: Optional[RandomSource] = None

    def set_allowed(self, char_class: CharacterClass, allowed: bool = True) -> "PolicyBuilder":
        self._allowed[CharacterClass(char_class)] = bool(allowed)
        return self

    def set_required(self, char_class: CharacterClass, required: bool = True) -> "PolicyBuilder":
        self._required[CharacterClass(char_class)] = bool(required)
        return self

    def set_ambiguous_allowed(self, allowed: bool = True) -> "PolicyBuilder":
        self._ambiguous_allowed = bool(allowed)
        return self

    def set_random_source(self, source: Optional[RandomSource]) -> "PolicyBuilder":
        """Use ``source`` for every draw; ``None`` restores the secure default."""
        if source is not None and not isinstance(source, RandomSource):
            raise TypeError(f"random source must provide next_int(bound), got {source!r}")
        self._random_source = source
        return self

    def build_policy(self) -> Policy:
        """
        Validate the collected flags and build the policy.

        Classes are checked in processing order and the first class that is
        required but not allowed is reported.

        Returns:
            The validated policy

        Raises:
            ConfigurationError: If a required class is not allowed, or no
                character is left to draw from
        """
        allowed = frozenset(c for c in CharacterClass if self._allowed[c])
        required = frozenset(c for c in CharacterClass if self._required[c])

        pool = "".join(c.alphabet for c in CharacterClass if c in allowed)
        if not self._ambiguous_allowed:
            pool = strip_ambiguous(pool)

        policy = Policy(
            allowed=allowed,
            required=required,
            ambiguous_allowed=self._ambiguous_allowed,
            pool=pool,
        )
        logger.debug(
            f"Policy built: allowed={[c.value for c in policy.allowed_classes]} "
            f"required={[c.value for c in policy.required_classes]} "
            f"ambiguous_allowed={policy.ambiguous_allowed} pool_size={len(pool)}"
        )
        return policy

    def build(self) -> "Generator":
        """Validate the flags and return a generator for the resulting policy."""
        from .generator import Generator

        return Generator(self.build_policy(), self._random_source)
