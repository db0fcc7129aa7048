"""Error categories raised by failed checks."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Optional, Type, Union


class CheckError(Exception):
    """A check failed. Base class of the built-in check errors."""


class CheckTypeError(CheckError, TypeError):
    """A value did not have the expected type or shape."""


class CheckReferenceError(CheckError, LookupError):
    """A value was undefined."""


class CheckRangeError(CheckError, ValueError):
    """A value was outside its acceptable range."""


class Kind(Enum):
    """The built-in error categories."""

    GENERIC = "generic"
    TYPE = "type"
    REFERENCE = "reference"
    RANGE = "range"

    @property
    def error_class(self) -> Type[CheckError]:
        """Get the exception class raised for this kind."""
        return _ERROR_CLASSES[self]


_ERROR_CLASSES = {
    Kind.GENERIC: CheckError,
    Kind.TYPE: CheckTypeError,
    Kind.REFERENCE: CheckReferenceError,
    Kind.RANGE: CheckRangeError,
}

# An error selector: a kind, an exception class, or a factory returning one.
ErrorFactory = Callable[..., BaseException]
ErrorSelector = Union[Kind, Type[BaseException], ErrorFactory]


def make_error(selector: ErrorSelector, message: Optional[str] = None) -> BaseException:
    """Build the exception for a failed check.

    The factory is called with no arguments when there is no message, so the
    resulting exception has no descriptive text.

    Raises:
        TypeError: If the selector is not callable or does not produce an
            exception.
    """
    factory: Any = selector.error_class if isinstance(selector, Kind) else selector
    if not callable(factory):
        raise TypeError(f"invalid error selector: {selector!r}")
    error = factory() if message is None else factory(message)
    if not isinstance(error, BaseException):
        raise TypeError(
            f"error selector {selector!r} returned {type(error).__name__}, not an exception"
        )
    return error


def kind_name(selector: ErrorSelector) -> str:
    """Get a short name for a selector, for log lines."""
    if isinstance(selector, Kind):
        return selector.value
    return getattr(selector, "__name__", type(selector).__name__)
