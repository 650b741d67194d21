"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: comparators.py
@DateTime: 2026-02-08
@Docs: Comparator enumerations and alias resolution for multi-clause checks.
多子句校验的比较符枚举与别名解析。

Aliases are resolved once, before any clause is evaluated; a name that does not
resolve becomes an ``UnknownComparator`` which the checks report per clause.
别名在子句求值前一次性解析；无法解析的名称变为 ``UnknownComparator``，
由各校验按子句报告。
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

logger = logging.getLogger(__name__)


class NumericComparator(StrEnum):
    """Canonical numericality comparators / 数值校验的规范比较符。"""

    EQUAL_TO = "equal_to"
    GREATER_THAN = "greater_than"
    GREATER_THAN_OR_EQUAL_TO = "greater_than_or_equal_to"
    LESS_THAN = "less_than"
    LESS_THAN_OR_EQUAL_TO = "less_than_or_equal_to"


class LengthComparator(StrEnum):
    """Canonical length comparators / 长度校验的规范比较符。"""

    GTE = "gte"
    GT = "gt"
    LTE = "lte"
    LT = "lt"
    IS = "is"
    IN = "in"


NUMERIC_ALIASES: Mapping[str, NumericComparator] = {
    "equal_to": NumericComparator.EQUAL_TO,
    "eq": NumericComparator.EQUAL_TO,
    "equals": NumericComparator.EQUAL_TO,
    "is": NumericComparator.EQUAL_TO,
    "greater_than": NumericComparator.GREATER_THAN,
    "gt": NumericComparator.GREATER_THAN,
    "greater_than_or_equal_to": NumericComparator.GREATER_THAN_OR_EQUAL_TO,
    "min": NumericComparator.GREATER_THAN_OR_EQUAL_TO,
    "gte": NumericComparator.GREATER_THAN_OR_EQUAL_TO,
    "less_than": NumericComparator.LESS_THAN,
    "lt": NumericComparator.LESS_THAN,
    "less_than_or_equal_to": NumericComparator.LESS_THAN_OR_EQUAL_TO,
    "max": NumericComparator.LESS_THAN_OR_EQUAL_TO,
    "lte": NumericComparator.LESS_THAN_OR_EQUAL_TO,
}

LENGTH_ALIASES: Mapping[str, LengthComparator] = {
    "min": LengthComparator.GTE,
    "gte": LengthComparator.GTE,
    "gt": LengthComparator.GT,
    "max": LengthComparator.LTE,
    "lte": LengthComparator.LTE,
    "lt": LengthComparator.LT,
    "is": LengthComparator.IS,
    "in": LengthComparator.IN,
}


@dataclass(frozen=True, slots=True)
class UnknownComparator:
    """A comparator name that matched no alias.
    未匹配任何别名的比较符名称。
    """

    name: Any

    @property
    def message(self) -> str:
        return f"unknown check '{self.name}'"


@dataclass(frozen=True, slots=True)
class Clause:
    """One resolved ``(comparator, threshold)`` pair.

    一个已解析的 ``(比较符, 阈值)`` 子句。

    Attributes:
        comparator: Canonical comparator or ``UnknownComparator``.
            规范比较符或 ``UnknownComparator``。
        threshold: Threshold value as given.
            原样保留的阈值。
    """

    comparator: NumericComparator | LengthComparator | UnknownComparator
    threshold: Any


def _comparator_key(name: Any) -> Any:
    # Accept enum members and other str subclasses by their plain value.
    return str(name) if isinstance(name, str) else name


def _clause_pairs(checks: Any) -> list[tuple[Any, Any]]:
    if isinstance(checks, Mapping):
        return list(checks.items())
    if isinstance(checks, Iterable) and not isinstance(checks, (str, bytes)):
        pairs = []
        for item in checks:
            if isinstance(item, tuple) and len(item) == 2:
                pairs.append(item)
            else:
                pairs.append((item, None))
        return pairs
    return []


def resolve_clauses(checks: Any, aliases: Mapping[str, Any]) -> list[Clause]:
    """Resolve a clause spec into canonical clauses, keeping order.

    将子句描述解析为规范子句，保持原有顺序。

    Args:
        checks: Mapping of comparator -> threshold, or iterable of pairs.
            比较符到阈值的映射，或键值对可迭代对象。
        aliases: Alias table for the check family.
            该校验族的别名表。

    Returns:
        list[Clause]: Resolved clauses in the given order.
            按原顺序排列的已解析子句。
    """
    resolved: list[Clause] = []
    for name, threshold in _clause_pairs(checks):
        key = _comparator_key(name)
        comparator = aliases.get(key) if isinstance(key, str) else None
        if comparator is None:
            logger.debug("Unknown comparator %r in clause spec", name)
            resolved.append(Clause(UnknownComparator(name), threshold))
        else:
            resolved.append(Clause(comparator, threshold))
    return resolved
