"""Condition evaluator for rule graph conditions."""

import math
import re
from typing import Any

from rule_designer.rule_engine.literals import (
    coerce,
    loose_equals,
    stringify,
    to_number,
)
from rule_designer.rule_engine.models import Operator


def _is_nan(number: int | float) -> bool:
    # ints can exceed float range, so only floats are NaN-checked
    return isinstance(number, float) and math.isnan(number)


class ConditionEvaluator:
    """Evaluator for a single condition against a resolved input value.

    Conditions never fail hard: a value that cannot be compared simply makes
    the condition false (or true for ``!=``).
    """

    def evaluate(self, actual: Any, operator: str | Operator, literal: str) -> bool:
        """Evaluate ``actual <operator> literal``.

        Args:
            actual: Value resolved from the input tree (may be UNDEFINED)
            operator: Operator or its raw tag (==, !=, >, <, >=, <=, contains, matches)
            literal: Raw literal text from the condition node

        Returns:
            Boolean result of the condition; unknown operators are False
        """
        if not isinstance(operator, Operator):
            operator = Operator.parse(operator)
            if operator is None:
                return False

        expected = coerce(literal).value

        if operator is Operator.EQ:
            return loose_equals(actual, expected)
        elif operator is Operator.NEQ:
            return not loose_equals(actual, expected)
        elif operator in (Operator.GT, Operator.LT, Operator.GTE, Operator.LTE):
            return self._compare_numbers(operator, actual, expected)
        elif operator is Operator.CONTAINS:
            return stringify(expected) in stringify(actual)
        elif operator is Operator.MATCHES:
            return self._matches(actual, expected)
        return False

    def _compare_numbers(self, operator: Operator, actual: Any, expected: Any) -> bool:
        """Numeric comparison; NaN on either side is always False."""
        left = to_number(actual)
        right = to_number(expected)
        if _is_nan(left) or _is_nan(right):
            return False

        if operator is Operator.GT:
            return left > right
        elif operator is Operator.LT:
            return left < right
        elif operator is Operator.GTE:
            return left >= right
        return left <= right

    def _matches(self, actual: Any, expected: Any) -> bool:
        """Regular-expression search; an invalid pattern never matches."""
        try:
            pattern = re.compile(stringify(expected))
        except (re.error, OverflowError, RecursionError):
            return False
        return pattern.search(stringify(actual)) is not None
