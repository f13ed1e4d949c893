"""
Password generation from a validated policy.
"""

import logging
import threading
from typing import List, Optional

from .charsets import CharacterClass, is_ambiguous
from .exceptions import LengthError
from .policy import Policy, PolicyBuilder
from .random_source import RandomSource, default_random_source


logger = logging.getLogger(__name__)


class Generator:
    """Generate passwords satisfying a :class:`~passgen.policy.Policy`.

    Calls to :meth:`generate` are serialized with a lock so that each
    password consumes an uninterrupted run of draws from the random source,
    even when the source itself is not thread-safe.
    """

    def __init__(self, policy: Policy, random_source: Optional[RandomSource] = None):
        if not isinstance(policy, Policy):
            raise TypeError(f"policy must be a Policy, got {type(policy).__name__}")
        self.policy = policy
        self.random_source = random_source if random_source is not None else default_random_source()
        self._lock = threading.Lock()

    def generate(self, length: int) -> str:
        """
        Generate one password.

        Args:
            length: Exact number of characters to produce

        Returns:
            Generated password string

        Raises:
            LengthError: If length cannot hold one character per required class
        """
        if isinstance(length, bool) or not isinstance(length, int):
            raise TypeError(f"length must be an int, got {type(length).__name__}")

        minimum = self.policy.minimum_length
        if length < 0:
            raise LengthError(f"Length must not be negative, got {length}", length, minimum)

        with self._lock:
            chars = [self._select_required(c) for c in self.policy.required_classes]

            if length < len(chars):
                raise LengthError(
                    f"Requested length {length} is insufficient for the required "
                    f"character classes (minimum {minimum})",
                    length,
                    minimum,
                )

            pool = self.policy.pool
            for _ in range(len(chars), length):
                chars.append(pool[self.random_source.next_int(len(pool))])

            self._shuffle(chars)

        logger.debug(f"Generated {length}-character password ({len(self.policy.required)} required classes)")
        return "".join(chars)

    def generate_many(self, count: int, length: int) -> List[str]:
        """Generate ``count`` passwords of the same length."""
        if count < 0:
            raise ValueError(f"count must not be negative, got {count}")
        return [self.generate(length) for _ in range(count)]

    def _select_required(self, char_class: CharacterClass) -> str:
        """Draw one character of a required class.

        Letters and digits are drawn from the full class alphabet and redrawn
        while ambiguous (if ambiguous characters are disallowed). Punctuation
        holds no ambiguous characters and takes a single draw.
        """
        alphabet = char_class.alphabet
        if char_class is CharacterClass.PUNCTUATION:
            return alphabet[self.random_source.next_int(len(alphabet))]

        redraws = 0
        while True:
            selected = alphabet[self.random_source.next_int(len(alphabet))]
            if self.policy.ambiguous_allowed or not is_ambiguous(selected):
                break
            redraws += 1

        if redraws:
            logger.debug(f"Redrew {char_class.value} character {redraws} time(s) to avoid ambiguity")
        return selected

    def _shuffle(self, chars: List[str]) -> None:
        """Fisher-Yates shuffle in place using the generator's random source."""
        for i in range(len(chars) - 1, 0, -1):
            position = self.random_source.next_int(i + 1)
            if position != i:
                chars[i], chars[position] = chars[position], chars[i]

    def __repr__(self) -> str:
        return f"Generator(policy={self.policy.describe()!r}, random_source={self.random_source!r})"


def generate_password(length: int = 16,
                      *,
                      upper_case: bool = True,
                      lower_case: bool = True,
                      digits: bool = True,
                      punctuation: bool = True,
                      require_upper_case: bool = False,
                      require_lower_case: bool = False,
                      require_digits: bool = False,
                      require_punctuation: bool = False,
                      allow_ambiguous: bool = False,
                      random_source: Optional[RandomSource] = None) -> str:
    """
    Convenience function to generate a password.

    Args:
        length: Password length
        upper_case: Allow upper-case letters
        lower_case: Allow lower-case letters
        digits: Allow digits
        punctuation: Allow punctuation characters
        require_upper_case: Guarantee at least one upper-case letter
        require_lower_case: Guarantee at least one lower-case letter
        require_digits: Guarantee at least one digit
        require_punctuation: Guarantee at least one punctuation character
        allow_ambiguous: Allow visually ambiguous characters (O, 0, l, 1)
        random_source: Source of random integers (secure default if None)

    Returns:
        Generated password string
    """
    builder = (PolicyBuilder()
               .set_allowed(CharacterClass.UPPER_CASE, upper_case)
               .set_allowed(CharacterClass.LOWER_CASE, lower_case)
               .set_allowed(CharacterClass.DIGIT, digits)
               .set_allowed(CharacterClass.PUNCTUATION, punctuation)
               .set_required(CharacterClass.UPPER_CASE, require_upper_case)
               .set_required(CharacterClass.LOWER_CASE, require_lower_case)
               .set_required(CharacterClass.DIGIT, require_digits)
               .set_required(CharacterClass.PUNCTUATION, require_punctuation)
               .set_ambiguous_allowed(allow_ambiguous)
               .set_random_source(random_source))

    return builder.build().generate(length)
