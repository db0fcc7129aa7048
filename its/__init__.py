"""Runtime assertions with categorized errors and templated messages."""

from __future__ import annotations

from its.assert_ import (
    check,
    must_be,
    must_be_arguments,
    must_be_array,
    must_be_boolean,
    must_be_date,
    must_be_defined,
    must_be_function,
    must_be_in_range,
    must_be_null,
    must_be_number,
    must_be_object,
    must_be_regexp,
    must_be_string,
    must_be_type,
    must_be_undefined,
    must_not_be_null,
)
from its.error_ import (
    CheckError,
    CheckRangeError,
    CheckReferenceError,
    CheckTypeError,
    ErrorSelector,
    Kind,
)
from its.template import PLACEHOLDER, render
from its.value import (
    PREDICATES,
    CheckName,
    Predicate,
    is_arguments,
    is_array,
    is_boolean,
    is_date,
    is_function,
    is_null,
    is_number,
    is_object,
    is_regexp,
    is_string,
    is_undefined,
    undefined,
)

__all__ = [
    # Assert
    "check",
    "must_be",
    "must_be_arguments",
    "must_be_array",
    "must_be_boolean",
    "must_be_date",
    "must_be_defined",
    "must_be_function",
    "must_be_in_range",
    "must_be_null",
    "must_be_number",
    "must_be_object",
    "must_be_regexp",
    "must_be_string",
    "must_be_type",
    "must_be_undefined",
    "must_not_be_null",
    # Error
    "CheckError",
    "CheckRangeError",
    "CheckReferenceError",
    "CheckTypeError",
    "ErrorSelector",
    "Kind",
    # Template
    "PLACEHOLDER",
    "render",
    # Value
    "PREDICATES",
    "CheckName",
    "Predicate",
    "is_arguments",
    "is_array",
    "is_boolean",
    "is_date",
    "is_function",
    "is_null",
    "is_number",
    "is_object",
    "is_regexp",
    "is_string",
    "is_undefined",
    "undefined",
]
