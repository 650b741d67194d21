"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: type_validation.py
@DateTime: 2026-02-08
@Docs: Structural type predicates used by the ``type`` check.
``type`` 校验使用的结构化类型判断。
"""

import dataclasses
import inspect
import re
import types
import uuid
from collections.abc import Callable, Mapping
from decimal import Decimal
from enum import Enum, StrEnum
from numbers import Real
from typing import Any

from pydantic import BaseModel

from contract_checks.record import MISSING

_UUID_RE = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE)

# Builtin shapes that are never treated as nominal records.
_PRIMITIVES = (
    bool,
    int,
    float,
    complex,
    Decimal,
    str,
    bytes,
    bytearray,
    list,
    tuple,
    dict,
    set,
    frozenset,
    range,
    types.NoneType,
    types.ModuleType,
)


class ValueType(StrEnum):
    """Known type tags / 已知类型标签。"""

    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    NUMBER = "number"
    STRING = "string"
    ATOM = "atom"
    LIST = "list"
    MAP = "map"
    TUPLE = "tuple"
    FUNCTION = "function"
    STRUCT = "struct"
    MODULE = "module"
    KEYWORD = "keyword"
    UUID = "uuid"


# Builtin classes accepted in place of a tag.
_BUILTIN_TAGS: dict[type, ValueType] = {
    bool: ValueType.BOOLEAN,
    int: ValueType.INTEGER,
    float: ValueType.FLOAT,
    str: ValueType.STRING,
    list: ValueType.LIST,
    dict: ValueType.MAP,
    tuple: ValueType.TUPLE,
}


def is_number(value: Any) -> bool:
    """Return True for real numbers, excluding booleans.
    判断是否为实数（不包括布尔值）。
    """
    return not isinstance(value, bool) and isinstance(value, (Real, Decimal))


def is_struct(value: Any) -> bool:
    """Return True for instances of nominal record types.

    判断是否为具名记录类型的实例。

    Dataclass instances, pydantic models, named tuples and instances of any
    other non-builtin class qualify; classes, functions and enum members do not.
    dataclass 实例、pydantic 模型、具名元组以及其他非内置类的实例均视为结构体；
    类、函数和枚举成员不算。
    """
    if value is MISSING:
        return False
    if isinstance(value, BaseModel):
        return True
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return True
    if isinstance(value, tuple) and hasattr(type(value), "_fields"):
        return True
    if isinstance(value, (type, Enum, *_PRIMITIVES)) or callable(value):
        return False
    return True


def is_function(value: Any) -> bool:
    return callable(value) and not isinstance(value, type)


def is_keyword(value: Any) -> bool:
    """A list of ``(str, value)`` pairs; the empty list qualifies.
    由 ``(str, 值)`` 二元组组成的列表；空列表也满足。
    """
    return isinstance(value, list) and all(
        isinstance(item, tuple) and len(item) == 2 and isinstance(item[0], str) for item in value
    )


def is_uuid(value: Any) -> bool:
    if isinstance(value, uuid.UUID):
        return True
    return isinstance(value, str) and _UUID_RE.fullmatch(value) is not None


_PREDICATES: dict[ValueType, Callable[[Any], bool]] = {
    ValueType.BOOLEAN: lambda v: isinstance(v, bool),
    ValueType.INTEGER: lambda v: isinstance(v, int) and not isinstance(v, bool),
    ValueType.FLOAT: lambda v: isinstance(v, float),
    ValueType.NUMBER: is_number,
    ValueType.STRING: lambda v: isinstance(v, str),
    ValueType.ATOM: lambda v: isinstance(v, Enum),
    ValueType.LIST: lambda v: isinstance(v, list),
    ValueType.MAP: lambda v: isinstance(v, Mapping),
    ValueType.TUPLE: lambda v: isinstance(v, tuple),
    ValueType.FUNCTION: is_function,
    ValueType.STRUCT: is_struct,
    ValueType.MODULE: inspect.ismodule,
    ValueType.KEYWORD: is_keyword,
    ValueType.UUID: is_uuid,
}


def resolve_type(check: Any) -> ValueType | None:
    """Resolve a tag (name, ``ValueType`` or builtin class) to a ``ValueType``.

    将类型标签（名称、``ValueType`` 或内置类）解析为 ``ValueType``。

    Returns:
        ValueType | None: Resolved tag, or None when unknown.
            解析后的标签；未知时返回 None。
    """
    if isinstance(check, type):
        return _BUILTIN_TAGS.get(check)
    if isinstance(check, str):
        try:
            return ValueType(str(check))
        except ValueError:
            return None
    return None


def check_value(value: Any, check: ValueType) -> bool:
    """Return True when ``value`` structurally matches ``check``.
    当 ``value`` 在结构上符合 ``check`` 时返回 True。
    """
    return _PREDICATES[check](value)
