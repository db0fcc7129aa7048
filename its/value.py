"""Value classification: the undefined sentinel and the type predicates."""

from __future__ import annotations

import datetime
import numbers
import re
from types import MappingProxyType
from typing import Any, Callable, Literal, Mapping


class _Undefined:
    """The type of the ``undefined`` sentinel.

    ``undefined`` marks a value that was not provided. It is distinct from
    ``None``, which stands for an explicit null.
    """

    _instance = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "undefined"


undefined = _Undefined()

# Values that are not objects for the purposes of is_object.
_PRIMITIVES = (type(None), _Undefined, bool, numbers.Number, str, bytes)


def is_undefined(value: Any) -> bool:
    """Check if a value is the undefined sentinel."""
    return value is undefined


def is_null(value: Any) -> bool:
    """Check if a value is None."""
    return value is None


def is_boolean(value: Any) -> bool:
    """Check if a value is True or False."""
    return isinstance(value, bool)


def is_array(value: Any) -> bool:
    """Check if a value is a list.

    Other sequences and iterables (tuples, ranges, generators) are not arrays.
    """
    return isinstance(value, list)


def is_arguments(value: Any) -> bool:
    """Check if a value is a captured ``*args`` tuple."""
    return isinstance(value, tuple)


def is_function(value: Any) -> bool:
    """Check if a value is callable."""
    return callable(value)


def is_string(value: Any) -> bool:
    """Check if a value is a str. Bytes are not strings."""
    return isinstance(value, str)


def is_number(value: Any) -> bool:
    """Check if a value is numeric, excluding booleans.

    NaN and the infinities are numbers.
    """
    return isinstance(value, numbers.Number) and not isinstance(value, bool)


def is_date(value: Any) -> bool:
    """Check if a value is a date or datetime."""
    return isinstance(value, datetime.date)


def is_regexp(value: Any) -> bool:
    """Check if a value is a compiled regular expression."""
    return isinstance(value, re.Pattern)


def is_object(value: Any) -> bool:
    """Check if a value is anything other than a primitive.

    Lists, tuples, dicts, functions and class instances are all objects.
    """
    return not isinstance(value, _PRIMITIVES)


CheckName = Literal[
    "arguments",
    "array",
    "boolean",
    "date",
    "function",
    "null",
    "number",
    "object",
    "regexp",
    "string",
    "undefined",
]

Predicate = Callable[[Any], bool]

# The fixed table of named checks.
PREDICATES: Mapping[str, Predicate] = MappingProxyType(
    {
        "arguments": is_arguments,
        "array": is_array,
        "boolean": is_boolean,
        "date": is_date,
        "function": is_function,
        "null": is_null,
        "number": is_number,
        "object": is_object,
        "regexp": is_regexp,
        "string": is_string,
        "undefined": is_undefined,
    }
)
