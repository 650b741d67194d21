"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: checks.py
@DateTime: 2026-02-08
@Docs: Low-level validation checks and the name-keyed dispatcher.
底层校验函数与按名称分发器。

Every check takes ``(check_items, item_name, check)`` and returns ``True`` or a
field-addressed error mapping ``{item_name: message}``. Failures are data and
are never raised.
每个校验接收 ``(check_items, item_name, check)``，返回 ``True`` 或按字段寻址的
错误映射 ``{item_name: message}``。失败以数据形式返回，不会抛出。

Provided checks / 提供的校验:
    - check_required / check_type / check_numericality
    - check_in / check_not_in / check_format (check_regex)
    - check_length / check_struct / check_func
    - check_equals (check_exactly) / check_allow_nil / check_subset_of
"""

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Final, Literal

from contract_checks.equality import multiset_difference, strict_equal, strict_member
from contract_checks.length import check_length
from contract_checks.numericality import check_numericality
from contract_checks.record import MISSING, as_record, check_item_present, get_check_item
from contract_checks.rendering import field_error, inspect_value, type_name
from contract_checks.type_validation import check_value as matches_type
from contract_checks.type_validation import is_struct, resolve_type
from contract_checks.typing import CheckError, CheckFn, CheckResult, PredicateFn

logger = logging.getLogger(__name__)

_SEQUENCE_TYPES = (list, tuple, set, frozenset)


def check_required(check_items: Any, item_name: Any, required: bool) -> Literal[True] | CheckError:
    """Check that a field is present when it is required.

    必填字段存在性校验。

    Examples:
        >>> check_required({}, "some_item", False)
        True
        >>> check_required([("a", 1), ("b", 2)], "a", True)
        True
        >>> check_required({"a": 1}, "b", True)
        {'b': 'is required'}
    """
    if not required:
        return True
    return check_item_present(check_items, item_name) or field_error(item_name, "is required")


def check_type(check_items: Any, item_name: Any, check: Any) -> Literal[True] | CheckError:
    """Check the type of a field; absent fields pass.

    校验字段类型；字段缺失时通过。

    Examples:
        >>> check_type({"a": 1}, "a", "integer")
        True
        >>> check_type({"a": None}, "a", "string")
        {'a': 'has wrong type; expected type: string, got: None'}
    """
    found = as_record(check_items).lookup(item_name)
    if not found.present:
        return True

    expected = resolve_type(check)
    if expected is None:
        logger.debug("Unknown type tag %r for %r", check, item_name)
        return field_error(item_name, f"unknown type '{check}'")

    if matches_type(found.value, expected):
        return True
    return field_error(
        item_name, f"has wrong type; expected type: {expected.value}, got: {inspect_value(found.value)}"
    )


def check_in(check_items: Any, item_name: Any, check_list: Any) -> Literal[True] | CheckError:
    """Check that a field value is a member of a list.

    校验字段值属于给定列表。

    Membership is type-sensitive; a non-sequence ``check_list`` passes.
    成员判断区分类型；``check_list`` 不是序列时直接通过。

    Examples:
        >>> check_in({"a": 1}, "a", [1, 2, 3])
        True
    """
    if not isinstance(check_list, _SEQUENCE_TYPES):
        return True
    check_item = get_check_item(check_items, item_name)
    if strict_member(check_item, check_list):
        return True
    return field_error(
        item_name, f"must be one of {inspect_value(check_list)}; got: {inspect_value(check_item)}"
    )


def check_not_in(check_items: Any, item_name: Any, check_list: Any) -> Literal[True] | CheckError:
    """Check that a field value is not a member of a list.

    校验字段值不属于给定列表。

    Examples:
        >>> check_not_in({"a": 4}, "a", [1, 2, 3])
        True
    """
    if not isinstance(check_list, _SEQUENCE_TYPES):
        return True
    check_item = get_check_item(check_items, item_name)
    if not strict_member(check_item, check_list):
        return True
    return field_error(
        item_name, f"must not be included in {inspect_value(check_list)}; got: {inspect_value(check_item)}"
    )


def check_format(check_items: Any, item_name: Any, check: re.Pattern[str] | str) -> Literal[True] | CheckError:
    """Check that a string field matches a pattern (``re.search`` semantics).

    校验字符串字段匹配正则（``re.search`` 语义）。

    Non-string values, absent fields included, pass. A ``check`` that is not
    a text pattern passes too; a pattern that does not compile is reported.
    非字符串值（包括缺失字段）直接通过。``check`` 不是文本正则时同样通过；
    无法编译的正则会被报告。

    Examples:
        >>> check_format({"a": "bar"}, "a", re.compile("bar"))
        True
        >>> check_format({"a": "foo"}, "a", "^bar$")
        {'a': "has invalid format; got: 'foo'"}
        >>> check_format({"a": "foo"}, "a", "(")
        {'a': "invalid format pattern '('"}
    """
    check_item = get_check_item(check_items, item_name)
    if not isinstance(check_item, str):
        return True
    if isinstance(check, str):
        try:
            pattern = re.compile(check)
        except re.error:
            logger.debug("Format pattern %r for %r does not compile", check, item_name)
            return field_error(item_name, f"invalid format pattern {inspect_value(check)}")
    elif isinstance(check, re.Pattern) and isinstance(check.pattern, str):
        pattern = check
    else:
        return True
    if pattern.search(check_item) is not None:
        return True
    return field_error(item_name, f"has invalid format; got: {inspect_value(check_item)}")


def check_regex(check_items: Any, item_name: Any, check: re.Pattern[str] | str) -> Literal[True] | CheckError:
    """Alias of ``check_format`` / ``check_format`` 的别名。"""
    return check_format(check_items, item_name, check)


def _expected_struct(check: Any) -> type | None:
    if isinstance(check, type):
        return check
    if is_struct(check):
        return type(check)
    return None


def _render_struct(value: Any) -> str:
    return type_name(type(value)) if is_struct(value) else inspect_value(value)


def check_struct(check_items: Any, item_name: Any, check: Any) -> Literal[True] | CheckError:
    """Check that a field holds an instance of the expected nominal type.

    校验字段是否为期望具名类型的实例。

    ``check`` may be a class or an exemplar instance; field values of the
    exemplar are ignored.
    ``check`` 可以是类或示例实例；示例实例的字段值会被忽略。
    """
    check_item = get_check_item(check_items, item_name)
    expected = _expected_struct(check)
    if expected is not None and isinstance(check_item, expected):
        return True
    rendered_expected = type_name(expected) if expected is not None else inspect_value(check)
    return field_error(
        item_name, f"is not expected struct; expected: {rendered_expected}; got: {_render_struct(check_item)}"
    )


@dataclass(frozen=True, slots=True)
class Invalid:
    """Failure returned by a ``check_func`` predicate.

    ``check_func`` 谓词返回的失败结果。

    ``Invalid()`` reports the generic "not valid"; ``Invalid(message)`` reports
    ``message`` verbatim.
    ``Invalid()`` 报告通用的 "not valid"；``Invalid(message)`` 原样报告 ``message``。
    """

    message: Any = None


INVALID: Final = Invalid()


def adapt_func_result(result: Any) -> Literal[True] | Invalid:
    """Adapt a predicate's native return value.

    适配谓词的原生返回值。

    ``False`` and ``Invalid`` mean failure. Anything else, ``None`` included,
    means success.
    ``False`` 与 ``Invalid`` 表示失败；其他任何值（包括 ``None``）都表示成功。
    """
    if isinstance(result, Invalid):
        return result
    if result is False:
        return INVALID
    return True


def check_func(check_items: Any, item_name: Any, check: PredicateFn) -> Literal[True] | CheckError:
    """Check a field with a custom predicate.

    使用自定义谓词校验字段。

    The predicate is called as ``check((item_name, value), check_items)``;
    ``value`` is None when the field is absent. Exceptions propagate.
    谓词以 ``check((item_name, value), check_items)`` 调用；字段缺失时 ``value``
    为 None。异常会向上抛出。

    Examples:
        >>> check_func({"a": 1}, "a", lambda item, _all: item[1] > 0)
        True
        >>> check_func({"a": 1}, "a", lambda item, _all: item[1] is None)
        {'a': 'not valid'}
        >>> check_func({"a": -1}, "a", lambda item, _all: Invalid("my_error"))
        {'a': 'my_error'}
    """
    check_item = get_check_item(check_items, item_name, None)
    outcome = adapt_func_result(check((item_name, check_item), check_items))
    if outcome is True:
        return True
    return field_error(item_name, "not valid" if outcome.message is None else outcome.message)


def check_equals(check_items: Any, item_name: Any, check_value: Any) -> Literal[True] | CheckError:
    """Check that a field value equals the given value, types included.

    校验字段值与给定值严格相等（包括类型）。

    Examples:
        >>> check_equals({"a": 1}, "a", 1)
        True
        >>> check_equals({"a": 1.0}, "a", 1)
        {'a': 'must be equal to 1; got: 1.0'}
    """
    check_item = get_check_item(check_items, item_name)
    if strict_equal(check_item, check_value):
        return True
    return field_error(item_name, f"must be equal to {inspect_value(check_value)}; got: {inspect_value(check_item)}")


def check_exactly(check_items: Any, item_name: Any, check_value: Any) -> Literal[True] | CheckError:
    """Alias of ``check_equals`` / ``check_equals`` 的别名。"""
    return check_equals(check_items, item_name, check_value)


def check_allow_nil(check_items: Any, item_name: Any, allowed: bool) -> Literal[True] | CheckError:
    """Check whether a None (or absent) value is allowed.

    校验是否允许 None（或缺失）值。
    """
    if allowed:
        return True
    check_item = get_check_item(check_items, item_name)
    if check_item is None or check_item is MISSING:
        return field_error(item_name, "doesn't allow nil")
    return True


def check_subset_of(check_items: Any, item_name: Any, check_list: Any) -> Literal[True] | CheckError:
    """Check that a field is a non-empty list whose items all come from ``check_list``.

    校验字段为非空列表，且其元素均来自 ``check_list``。

    Duplicates count: ``[1, 1]`` is not a subset of ``[1, 2]``.
    重复元素会计数：``[1, 1]`` 不是 ``[1, 2]`` 的子集。
    """
    if not isinstance(check_list, _SEQUENCE_TYPES):
        return True
    check_item = get_check_item(check_items, item_name)
    if not isinstance(check_item, list):
        return field_error(item_name, f"must be a list; got: {inspect_value(check_item)}")
    if check_item and not multiset_difference(check_item, check_list):
        return True
    return field_error(
        item_name, f"must be a subset of {inspect_value(check_list)}; got: {inspect_value(check_item)}"
    )


CHECKS: Mapping[str, CheckFn] = MappingProxyType(
    {
        "type": check_type,
        "required": check_required,
        "numericality": check_numericality,
        "in": check_in,
        "not_in": check_not_in,
        "format": check_format,
        "regex": check_regex,
        "length": check_length,
        "struct": check_struct,
        "func": check_func,
        "equals": check_equals,
        "exactly": check_exactly,
        "allow_nil": check_allow_nil,
        "subset_of": check_subset_of,
    }
)


def run_check(check_items: Any, item_name: Any, check_name: str, check: Any) -> CheckResult:
    """Run a check by name.

    按名称运行校验。

    Args:
        check_items: Record.
            记录。
        item_name: Field identifier.
            字段标识。
        check_name: Check name (e.g. ``"numericality"``, ``"regex"``).
            校验名称（如 ``"numericality"``、``"regex"``）。
        check: Constraint spec for that check.
            该校验的约束描述。

    Returns:
        CheckResult: Result of the check, or an "unknown check" error.
            校验结果；名称未知时返回 "unknown check" 错误。
    """
    fn = CHECKS.get(str(check_name)) if isinstance(check_name, str) else None
    if fn is None:
        logger.debug("Unknown check %r for %r", check_name, item_name)
        return field_error(item_name, f"unknown check '{check_name}'")
    return fn(check_items, item_name, check)
