"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: numericality.py
@DateTime: 2026-02-08
@Docs: Multi-clause numericality check.
多子句数值校验。
"""

import logging
import operator
from collections.abc import Callable
from decimal import InvalidOperation
from typing import Any

from contract_checks.comparators import NUMERIC_ALIASES, Clause, NumericComparator, UnknownComparator, resolve_clauses
from contract_checks.record import as_record
from contract_checks.rendering import field_error, inspect_value
from contract_checks.type_validation import is_number
from contract_checks.typing import CheckResult, ClauseResult, Clauses

logger = logging.getLogger(__name__)

_RULES: dict[NumericComparator, tuple[Callable[[Any, Any], bool], str]] = {
    NumericComparator.EQUAL_TO: (operator.eq, "equal to"),
    NumericComparator.GREATER_THAN: (operator.gt, "greater than"),
    NumericComparator.GREATER_THAN_OR_EQUAL_TO: (operator.ge, "greater than or equal to"),
    NumericComparator.LESS_THAN: (operator.lt, "less than"),
    NumericComparator.LESS_THAN_OR_EQUAL_TO: (operator.le, "less than or equal to"),
}


def _compare(compare: Callable[[Any, Any], bool], number: Any, threshold: Any) -> bool:
    if not is_number(threshold):
        logger.debug("Threshold %r is not comparable with %r", threshold, number)
        return False
    try:
        return bool(compare(number, threshold))
    except InvalidOperation:
        # Ordering a Decimal NaN (or any signalling NaN) is an invalid operation.
        logger.debug("Threshold %r is not comparable with %r", threshold, number)
        return False


def _check_number(number: Any, item_name: Any, clause: Clause) -> ClauseResult:
    comparator = clause.comparator
    if isinstance(comparator, UnknownComparator):
        return field_error(item_name, comparator.message)
    compare, phrase = _RULES[comparator]
    if _compare(compare, number, clause.threshold):
        return True
    return field_error(item_name, f"must be {phrase} {clause.threshold}; got: {inspect_value(number)}")


def check_numericality(check_items: Any, item_name: Any, checks: Clauses) -> CheckResult:
    """Check a field over numericality constraints.

    按数值约束校验字段。

    All clauses passing collapses to ``True``; any failure returns the full
    list of per-clause results in clause order.
    所有子句通过时返回 ``True``；任一失败时按子句顺序返回完整结果列表。

    Examples:
        >>> check_numericality({"a": 3}, "a", {"equal_to": 3})
        True
        >>> check_numericality({"a": 5}, "a", {"greater_than_or_equal_to": 3, "less_than": 4})
        [True, {'a': 'must be less than 4; got: 5'}]

    Args:
        check_items: Record.
            记录。
        item_name: Field identifier.
            字段标识。
        checks: Comparator -> threshold clauses.
            比较符 -> 阈值 子句。

    Returns:
        CheckResult: ``True``, a single error, or a list of clause results.
            ``True``、单个错误或子句结果列表。
    """
    found = as_record(check_items).lookup(item_name)
    if not found.present:
        return True
    number = found.value
    if not is_number(number):
        return field_error(item_name, f"not a number. got: {inspect_value(number)}")

    results = [_check_number(number, item_name, clause) for clause in resolve_clauses(checks, NUMERIC_ALIASES)]
    if all(result is True for result in results):
        return True
    return results
