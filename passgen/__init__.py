"""
passgen - random passwords from composition rules.

Build a policy, then generate::

    from passgen import CharacterClass, PolicyBuilder

    generator = PolicyBuilder().set_required(CharacterClass.DIGIT).build()
    password = generator.generate(16)
"""

from .charsets import AMBIGUOUS_CHARS, CharacterClass
from .exceptions import ConfigurationError, LengthError, PassgenException
from .generator import Generator, generate_password
from .policy import Policy, PolicyBuilder
from .random_source import RandomSource, SecureRandomSource, SeededRandomSource

__all__ = [
    'AMBIGUOUS_CHARS',
    'CharacterClass',
    'ConfigurationError',
    'Generator',
    'LengthError',
    'PassgenException',
    'Policy',
    'PolicyBuilder',
    'RandomSource',
    'SecureRandomSource',
    'SeededRandomSource',
    'generate_password',
]
