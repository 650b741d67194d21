"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: record.py
@DateTime: 2026-02-08
@Docs: Record accessor: keyed lookup with an explicit presence test.
记录访问器：带显式存在性判断的按键查找。

Two record shapes are supported transparently:
透明支持两种记录形态：
- Mapping: ``{"a": 1}``.
    映射：``{"a": 1}``。
- Pairs: ``[("a", 1), ("b", 2)]`` (first matching pair wins).
    键值对列表：``[("a", 1), ("b", 2)]``（取第一个匹配项）。

Anything else is an unsupported record where every field is missing.
其他形态视为不支持的记录，所有字段均视为缺失。
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Final, Protocol


class _Missing:
    """Marker for "no such key", distinct from a stored ``None``.
    “键不存在”标记，区别于存储的 ``None``。
    """

    __slots__ = ()
    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "<missing>"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "MISSING"


MISSING: Final = _Missing()


@dataclass(frozen=True, slots=True)
class Lookup:
    """Result of a field lookup (present value or missing).

    字段查找结果（存在的值或缺失）。

    Attributes:
        present: Whether the key exists in the record.
            键是否存在于记录中。
        value: Stored value (``MISSING`` when absent).
            存储的值（缺失时为 ``MISSING``）。
    """

    present: bool
    value: Any = MISSING

    @classmethod
    def found(cls, value: Any) -> "Lookup":
        return cls(present=True, value=value)

    @classmethod
    def missing(cls) -> "Lookup":
        return cls(present=False)

    def value_or(self, default: Any) -> Any:
        """Return the stored value, or ``default`` when missing.
        返回存储值；缺失时返回 ``default``。
        """
        return self.value if self.present else default


class RecordView(Protocol):
    """
    Keyed lookup with presence test.
    带存在性判断的按键查找协议。
    """

    def lookup(self, item_name: Any) -> Lookup: ...

    def has(self, item_name: Any) -> bool: ...


@dataclass(frozen=True, slots=True)
class MappingRecord:
    """Record view over a Mapping.
    基于映射的记录视图。
    """

    items: Mapping[Any, Any]

    def lookup(self, item_name: Any) -> Lookup:
        # Membership first so that defaultdict-like mappings are not mutated.
        if not self.has(item_name):
            return Lookup.missing()
        return Lookup.found(self.items[item_name])

    def has(self, item_name: Any) -> bool:
        try:
            return item_name in self.items
        except TypeError:
            # unhashable key
            return False


@dataclass(frozen=True, slots=True)
class PairsRecord:
    """Record view over a sequence of ``(key, value)`` pairs.
    基于键值对序列的记录视图。
    """

    items: Sequence[Any]

    def lookup(self, item_name: Any) -> Lookup:
        for pair in self.items:
            if isinstance(pair, tuple) and len(pair) == 2 and pair[0] == item_name:
                return Lookup.found(pair[1])
        return Lookup.missing()

    def has(self, item_name: Any) -> bool:
        return self.lookup(item_name).present


@dataclass(frozen=True, slots=True)
class UnsupportedRecord:
    """Record view for shapes that are neither mappings nor pairs.
    既不是映射也不是键值对的记录视图。
    """

    items: Any = None

    def lookup(self, item_name: Any) -> Lookup:
        return Lookup.missing()

    def has(self, item_name: Any) -> bool:
        return False


def as_record(check_items: Any) -> RecordView:
    """Wrap raw check items into a record view.

    将原始记录包装为记录视图。

    Args:
        check_items: Mapping, list/tuple of pairs, or anything else.
            映射、键值对列表/元组或其他任意值。

    Returns:
        RecordView: Matching adapter.
            对应的适配器。
    """
    if isinstance(check_items, Mapping):
        return MappingRecord(check_items)
    if isinstance(check_items, (list, tuple)):
        return PairsRecord(check_items)
    return UnsupportedRecord(check_items)


def get_check_item(check_items: Any, item_name: Any, default: Any = MISSING) -> Any:
    """Return a field value from either a Mapping or a list of pairs.

    从映射或键值对列表中获取字段值。

    Examples:
        >>> get_check_item({"a": 1, "b": 2}, "a")
        1
        >>> get_check_item([("a", 1), ("b", 2)], "b")
        2
        >>> get_check_item({"a": 1}, "c")
        <missing>

    Args:
        check_items: Record to read from.
            待读取的记录。
        item_name: Field identifier.
            字段标识。
        default: Returned when the field is absent (default ``MISSING``).
            字段缺失时返回的值（默认 ``MISSING``）。

    Returns:
        Any: Stored value (``None`` included) or ``default``.
            存储的值（包括 ``None``）或 ``default``。
    """
    return as_record(check_items).lookup(item_name).value_or(default)


def check_item_present(check_items: Any, item_name: Any) -> bool:
    """Check whether a field has an entry, even one storing ``None``.

    判断字段是否存在（即使存储值为 ``None``）。

    Examples:
        >>> check_item_present({"a": 1, "b": None}, "b")
        True
        >>> check_item_present([("a", 1)], "c")
        False
    """
    return as_record(check_items).has(item_name)
