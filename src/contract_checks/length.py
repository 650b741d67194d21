"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: length.py
@DateTime: 2026-02-08
@Docs: Multi-clause length check.
多子句长度校验。

Unlike numericality, the result is always the full list of clause results,
even when every clause passes.
与数值校验不同，即使所有子句都通过，结果也始终是完整的子句结果列表。
"""

import logging
import operator
from collections.abc import Callable, Container, Mapping
from enum import Enum
from typing import Any

from contract_checks.comparators import LENGTH_ALIASES, Clause, LengthComparator, UnknownComparator, resolve_clauses
from contract_checks.record import as_record
from contract_checks.rendering import field_error, inspect_value
from contract_checks.type_validation import is_number
from contract_checks.typing import ClauseResult, Clauses

logger = logging.getLogger(__name__)

WRONG_TYPE_MESSAGE = "length check supports only lists, binaries, atoms, maps and tuples"


def _contains(length: int, container: Any) -> bool:
    return length in container


_RULES: dict[LengthComparator, tuple[Callable[[int, Any], bool], str]] = {
    LengthComparator.GTE: (operator.ge, "length must be greater than or equal to"),
    LengthComparator.GT: (operator.gt, "length must be greater than"),
    LengthComparator.LTE: (operator.le, "length must be less than or equal to"),
    LengthComparator.LT: (operator.lt, "length must be less than"),
    LengthComparator.IS: (operator.eq, "length must be equal to"),
    LengthComparator.IN: (_contains, "length must be in range"),
}


def get_length(value: Any) -> int | None:
    """Return the length measure of a value, or None for unsupported shapes.

    返回值的长度度量；不支持的形态返回 None。

    - list/tuple: element count / 元素数量
    - str: character count / 字符数量
    - enum member: length of its name / 名称长度
    - mapping: key count / 键数量
    """
    if isinstance(value, Enum):
        return len(value.name)
    if isinstance(value, (list, tuple, str, Mapping)):
        return len(value)
    return None


def _usable_threshold(comparator: LengthComparator, threshold: Any) -> bool:
    if comparator is LengthComparator.IN:
        # ``int in "abc"`` raises rather than answering.
        return isinstance(threshold, Container) and not isinstance(threshold, (str, bytes))
    return is_number(threshold)


def _check_length(item_name: Any, actual_length: int | None, clause: Clause) -> ClauseResult:
    if actual_length is None:
        return field_error(item_name, WRONG_TYPE_MESSAGE)
    comparator = clause.comparator
    if isinstance(comparator, UnknownComparator):
        return field_error(item_name, comparator.message)
    compare, phrase = _RULES[comparator]
    if _usable_threshold(comparator, clause.threshold):
        if compare(actual_length, clause.threshold):
            return True
    else:
        logger.debug("Length threshold %r is not usable for %s", clause.threshold, comparator)
    return field_error(item_name, f"{phrase} {inspect_value(clause.threshold)}; got length: {actual_length}")


def check_length(check_items: Any, item_name: Any, checks: Clauses) -> list[ClauseResult]:
    """Check a field over length constraints.

    按长度约束校验字段。

    Examples:
        >>> check_length({"a": "123"}, "a", {"min": 0})
        [True]
        >>> check_length({"a": ["1", "2", "3"]}, "a", {"in": range(2, 5)})
        [True]
        >>> check_length({"a": ["1", "2", "3"]}, "a", {"is": 3, "max": 4})
        [True, True]

    Args:
        check_items: Record.
            记录。
        item_name: Field identifier.
            字段标识。
        checks: Comparator -> threshold clauses (``in`` takes a range).
            比较符 -> 阈值 子句（``in`` 接收一个 range）。

    Returns:
        list[ClauseResult]: One result per clause, in clause order.
            每个子句一个结果，按子句顺序排列。
    """
    clauses = resolve_clauses(checks, LENGTH_ALIASES)
    found = as_record(check_items).lookup(item_name)
    if not found.present:
        return [True for _ in clauses]

    actual_length = get_length(found.value)
    return [_check_length(item_name, actual_length, clause) for clause in clauses]
