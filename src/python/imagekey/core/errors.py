"""
Exceptions raised while parsing parameter strings and building cache paths.
"""

from typing import Optional


class ParameterError(ValueError):
    """Base class for every parameter string failure."""

    def __init__(self, message: str, key: Optional[str] = None, value: Optional[str] = None):
        super().__init__(message)
        self.key = key
        self.value = value


class InvalidNumberError(ParameterError):
    """A numeric parameter could not be parsed as an integer."""


class OutOfRangeError(ParameterError):
    """A numeric parameter was not strictly positive."""


class InvalidEnumError(ParameterError):
    """A coded parameter is not a member of its enumeration."""


class InvalidLengthError(InvalidEnumError):
    """A coded parameter is longer than any member of its enumeration."""


class MalformedTokenError(ParameterError):
    """A token could not be split into a key and a value."""


class UnknownTransformationError(ParameterError):
    """A named transformation has no registered preset."""


class PathError(ValueError):
    """Base class for image path failures."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class MissingExtensionError(PathError):
    """The image path has no extension to insert parameters before."""
