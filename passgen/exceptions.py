"""
Custom exceptions for passgen.
"""


class PassgenException(Exception):
    """Base exception for passgen."""

    pass


class ConfigurationError(PassgenException, ValueError):
    """Password policy is inconsistent or cannot produce any character."""

    def __init__(self, message: str, char_class=None):
        super().__init__(message)
        self.char_class = char_class

    def __reduce__(self):
        return self.__class__, (str(self), self.char_class)


class LengthError(PassgenException, ValueError):
    """Requested length cannot hold the required characters."""

    def __init__(self, message: str, length: int = None, minimum: int = None):
        super().__init__(message)
        self.length = length
        self.minimum = minimum

    def __reduce__(self):
        return self.__class__, (str(self), self.length, self.minimum)
