"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: equality.py
@DateTime: 2026-02-08
@Docs: Strict (type-sensitive) equality and membership.
严格（类型敏感）相等与成员判断。

Python's ``==`` treats ``1 == 1.0 == True``; checks need these to differ.
Python 的 ``==`` 认为 ``1 == 1.0 == True``；校验需要区分它们。
"""

from collections.abc import Iterable
from typing import Any


def strict_equal(left: Any, right: Any) -> bool:
    """Compare two values requiring identical types, recursively.

    递归比较两个值，要求类型完全一致。

    Examples:
        >>> strict_equal(1, 1)
        True
        >>> strict_equal(1, 1.0)
        False
        >>> strict_equal([1, (2, "a")], [1, (2, "a")])
        True
    """
    if left is right:
        return True
    if type(left) is not type(right):
        return False
    if isinstance(left, (list, tuple)):
        return len(left) == len(right) and all(strict_equal(a, b) for a, b in zip(left, right, strict=True))
    if isinstance(left, dict):
        if len(left) != len(right):
            return False
        # Dict lookup matches 1 and 1.0; recover right's own key to compare strictly.
        right_keys = {key: key for key in right}
        for key, value in left.items():
            if key not in right_keys or not strict_equal(key, right_keys[key]):
                return False
            if not strict_equal(value, right[key]):
                return False
        return True
    if isinstance(left, (set, frozenset)):
        # Set members are already hashed by value; types must still line up.
        return left == right and all(strict_member(v, right) for v in left)
    try:
        return bool(left == right)
    except (ValueError, TypeError):
        # e.g. array-likes whose truth value is ambiguous
        return False


def strict_member(value: Any, values: Iterable[Any]) -> bool:
    """Return True when ``value`` is strictly equal to an element of ``values``.
    当 ``value`` 与 ``values`` 中任一元素严格相等时返回 True。
    """
    return any(strict_equal(value, candidate) for candidate in values)


def multiset_difference(values: Iterable[Any], removals: Iterable[Any]) -> list[Any]:
    """Remove the first strictly-equal occurrence of each removal.

    对每个待移除元素，删除第一个严格相等的出现。

    Examples:
        >>> multiset_difference([1, 1, 2], [1, 3])
        [1, 2]
    """
    remaining = list(values)
    for removal in removals:
        for index, candidate in enumerate(remaining):
            if strict_equal(candidate, removal):
                del remaining[index]
                break
    return remaining
