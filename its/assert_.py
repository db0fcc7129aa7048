"""Assertion utilities: the generic check and the typed checks built on it.

Every check takes the value under test first, then an optional message and
any template arguments for that message:

    must_be_type(isinstance(team, str))
    must_be_string(team, "expected a team name, got %s", team)

A check returns its first argument when it passes and raises when it fails.
"""

from __future__ import annotations

import logging
from typing import Any, NoReturn, Optional, Sequence

from its.error_ import ErrorSelector, Kind, kind_name, make_error
from its.template import render
from its.value import PREDICATES, is_null, is_undefined, undefined

logger = logging.getLogger(__name__)


def _resolve_message(message: Any, args: Sequence[Any]) -> Optional[str]:
    if message is None:
        if args:
            logger.debug("event=template_args_dropped count=%d", len(args))
        return None
    if args:
        return render(str(message), args)
    return message


def _fail(selector: ErrorSelector, message: Any, args: Sequence[Any]) -> NoReturn:
    resolved = _resolve_message(message, args)
    logger.debug("event=check_failed kind=%s message=%s", kind_name(selector), resolved)
    raise make_error(selector, resolved)


def check(expression: Any, *args: Any, error: Optional[ErrorSelector] = None) -> Any:
    """Raise an error if a given expression is False.

    The error to raise can be chosen with the ``error`` keyword, or
    positionally: when the first argument after the expression is present and
    is not a string, it is the error selector and the message follows it. A
    string in that position is always a message.

    Args:
        expression: The determinant of whether an error is raised. Only
            ``False`` itself fails; other falsy values are returned.
        *args: ``[error,] [message, *message_args]``.
        error: A ``Kind``, an exception class, or a callable returning an
            exception. Defaults to ``Kind.GENERIC``.

    Returns:
        The expression passed.

    Raises:
        CheckError: Or the selected error, if the expression is False.

    Example:
        check(0 < 10)  # True
        check(0 > 10)  # raises CheckError with no message
        check(0 > 10, "Something went wrong!")
        check(0 > 10, "%s went %s!", "something", "wrong")
        check(0 > 10, ValueError, "%s went %s!", "something", "wrong")
        check(0 > 10, error=Kind.RANGE)
    """
    if expression is not False:
        return expression
    if error is None and args and args[0] is not None and not isinstance(args[0], str):
        error, args = args[0], args[1:]
    message = args[0] if args else None
    _fail(error if error is not None else Kind.GENERIC, message, args[1:])


def must_be_type(expression: Any, message: Optional[str] = None, *args: Any) -> Any:
    """Raise a CheckTypeError if a given expression is False.

    Args:
        expression: The determinant of whether an error is raised.
        message: A message or message template for the error.
        *args: Arguments for the message template.

    Returns:
        The expression passed.

    Raises:
        CheckTypeError: If the expression is False.

    Example:
        must_be_type(isinstance("Team", str))  # True
        must_be_type(isinstance("Team", int))  # raises with no message
        must_be_type(False, "%s went %s!", "something", "wrong")
    """
    if expression is False:
        _fail(Kind.TYPE, message, args)
    return expression


def must_be_defined(
    expression: Any = undefined, message: Optional[str] = None, *args: Any
) -> Any:
    """Raise a CheckReferenceError if a given value is undefined.

    ``None`` and other falsy values are defined.

    Returns:
        The value passed.

    Example:
        must_be_defined("Something")  # "Something"
        must_be_defined(undefined, "%s is missing", "team")
    """
    if is_undefined(expression):
        _fail(Kind.REFERENCE, message, args)
    return expression


def must_not_be_null(expression: Any, message: Optional[str] = None, *args: Any) -> Any:
    """Raise a CheckTypeError if a given value is None, else return it."""
    must_be_type(not is_null(expression), message, *args)
    return expression


def must_be_in_range(expression: Any, message: Optional[str] = None, *args: Any) -> Any:
    """Raise a CheckRangeError if a given expression is False.

    Returns:
        The expression passed.

    Example:
        must_be_in_range(1 > 0)  # True
        must_be_in_range(1 < 0, "%s is out of range", 1)  # raises
    """
    if expression is False:
        _fail(Kind.RANGE, message, args)
    return expression


def must_be(name: str, expression: Any, message: Optional[str] = None, *args: Any) -> bool:
    """Run the named predicate against a value as a type check.

    Args:
        name: One of the names in ``PREDICATES``.
        expression: The value to classify.
        message: A message or message template for the error.
        *args: Arguments for the message template.

    Returns:
        True.

    Raises:
        CheckTypeError: If the predicate does not hold.
        ValueError: If there is no check with the given name.
    """
    predicate = PREDICATES.get(name)
    if predicate is None:
        raise ValueError(f"unknown check: {name}")
    return must_be_type(predicate(expression), message, *args)


def must_be_arguments(expression: Any, message: Optional[str] = None, *args: Any) -> bool:
    """Check that a value is an ``*args`` tuple."""
    return must_be("arguments", expression, message, *args)


def must_be_array(expression: Any, message: Optional[str] = None, *args: Any) -> bool:
    """Check that a value is a list."""
    return must_be("array", expression, message, *args)


def must_be_boolean(expression: Any, message: Optional[str] = None, *args: Any) -> bool:
    """Check that a value is True or False."""
    return must_be("boolean", expression, message, *args)


def must_be_date(expression: Any, message: Optional[str] = None, *args: Any) -> bool:
    """Check that a value is a date or datetime."""
    return must_be("date", expression, message, *args)


def must_be_function(expression: Any, message: Optional[str] = None, *args: Any) -> bool:
    """Check that a value is callable."""
    return must_be("function", expression, message, *args)


def must_be_null(expression: Any, message: Optional[str] = None, *args: Any) -> bool:
    """Check that a value is None."""
    return must_be("null", expression, message, *args)


def must_be_number(expression: Any, message: Optional[str] = None, *args: Any) -> bool:
    """Check that a value is numeric and not a bool."""
    return must_be("number", expression, message, *args)


def must_be_object(expression: Any, message: Optional[str] = None, *args: Any) -> bool:
    """Check that a value is not a primitive."""
    return must_be("object", expression, message, *args)


def must_be_regexp(expression: Any, message: Optional[str] = None, *args: Any) -> bool:
    """Check that a value is a compiled regular expression."""
    return must_be("regexp", expression, message, *args)


def must_be_string(expression: Any, message: Optional[str] = None, *args: Any) -> bool:
    """Check that a value is a str."""
    return must_be("string", expression, message, *args)


def must_be_undefined(expression: Any, message: Optional[str] = None, *args: Any) -> bool:
    """Check that a value is the undefined sentinel."""
    return must_be("undefined", expression, message, *args)
