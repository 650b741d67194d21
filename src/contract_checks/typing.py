"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: typing.py
@DateTime: 2026-02-08
@Docs: Shared protocols and types for contract checks.
契约校验共享协议与类型。
"""

from collections.abc import Hashable, Mapping, Sequence
from typing import Any, Protocol

type ItemName = Hashable
type CheckItems = Mapping[Any, Any] | Sequence[tuple[Any, Any]]
type CheckError = dict[Any, Any]
type ClauseResult = bool | CheckError
type CheckResult = bool | CheckError | list[ClauseResult]
type Clauses = Mapping[Any, Any] | Sequence[tuple[Any, Any]]


class CheckFn(Protocol):
    """
    Check function protocol.
    校验函数协议。

    Returns:
        CheckResult: ``True`` or field-addressed error(s).
        CheckResult: ``True`` 或按字段寻址的错误。
    """

    def __call__(self, check_items: Any, item_name: Any, check: Any, /) -> CheckResult: ...


class PredicateFn(Protocol):
    """
    Custom predicate protocol used by ``check_func``.
    ``check_func`` 使用的自定义谓词协议。

    Args:
        item: ``(item_name, value)`` pair.
        item: ``(字段名, 值)`` 二元组。
        check_items: The whole record.
        check_items: 完整记录。
    """

    def __call__(self, item: tuple[Any, Any], check_items: Any, /) -> Any: ...
