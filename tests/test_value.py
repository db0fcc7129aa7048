"""Value predicate tests."""

from __future__ import annotations

import copy
import datetime
import decimal
import fractions
import math
import pickle
import re
import unittest

from its import value as value_module
from its.value import (
    PREDICATES,
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


def _capture(*args):
    return args


class UndefinedTests(unittest.TestCase):
    def test_sentinel_is_singleton(self) -> None:
        self.assertIs(undefined, type(undefined)())
        self.assertIs(undefined, copy.copy(undefined))
        self.assertIs(undefined, copy.deepcopy(undefined))
        self.assertIs(undefined, pickle.loads(pickle.dumps(undefined)))

    def test_sentinel_is_not_none(self) -> None:
        self.assertIsNot(undefined, None)
        self.assertFalse(undefined)
        self.assertEqual("undefined", repr(undefined))
        self.assertTrue(is_undefined(undefined))
        self.assertFalse(is_undefined(None))
        self.assertTrue(is_null(None))
        self.assertFalse(is_null(undefined))


class PredicateTests(unittest.TestCase):
    def test_array_is_list_only(self) -> None:
        self.assertTrue(is_array([]))
        self.assertTrue(is_array([1, 2]))
        self.assertFalse(is_array((1, 2)))
        self.assertFalse(is_array({}))
        self.assertFalse(is_array("ab"))
        self.assertFalse(is_array(range(2)))

    def test_arguments_is_args_tuple(self) -> None:
        self.assertTrue(is_arguments(_capture(1, 2)))
        self.assertTrue(is_arguments(_capture()))
        self.assertFalse(is_arguments([1, 2]))

    def test_function(self) -> None:
        self.assertTrue(is_function(len))
        self.assertTrue(is_function(lambda: None))
        self.assertTrue(is_function(dict))
        self.assertFalse(is_function("len"))

    def test_string(self) -> None:
        self.assertTrue(is_string(""))
        self.assertTrue(is_string("Team"))
        self.assertFalse(is_string(b"Team"))
        self.assertFalse(is_string(None))

    def test_number(self) -> None:
        for number in (0, 1.5, math.nan, math.inf, 2j, decimal.Decimal("1"), fractions.Fraction(1, 3)):
            self.assertTrue(is_number(number), number)
        self.assertFalse(is_number(True))
        self.assertFalse(is_number("1"))

    def test_boolean(self) -> None:
        self.assertTrue(is_boolean(True))
        self.assertTrue(is_boolean(False))
        self.assertFalse(is_boolean(0))
        self.assertFalse(is_boolean(None))

    def test_date(self) -> None:
        self.assertTrue(is_date(datetime.date(2024, 1, 1)))
        self.assertTrue(is_date(datetime.datetime(2024, 1, 1, 12)))
        self.assertFalse(is_date(datetime.time(12)))
        self.assertFalse(is_date("2024-01-01"))

    def test_regexp(self) -> None:
        self.assertTrue(is_regexp(re.compile("a+")))
        self.assertFalse(is_regexp("a+"))

    def test_object_includes_containers_and_functions(self) -> None:
        for value in ([], (), {}, set(), len, object(), re.compile("x")):
            self.assertTrue(is_object(value), value)
        for value in (None, undefined, True, 0, 1.5, "x", b"x"):
            self.assertFalse(is_object(value), value)


class PredicateTableTests(unittest.TestCase):
    def test_table_names(self) -> None:
        self.assertEqual(
            {
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
            },
            set(PREDICATES),
        )
        self.assertIs(is_array, PREDICATES["array"])

    def test_table_is_read_only(self) -> None:
        with self.assertRaises(TypeError):
            PREDICATES["list"] = is_array  # type: ignore[index]
        with self.assertRaises(TypeError):
            del PREDICATES["array"]  # type: ignore[attr-defined]
        self.assertIs(PREDICATES, value_module.PREDICATES)


if __name__ == "__main__":
    unittest.main()
