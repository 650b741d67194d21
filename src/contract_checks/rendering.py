"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: rendering.py
@DateTime: 2026-02-08
@Docs: Error formatting: value rendering and field-error mappings.
错误格式化：值渲染与字段错误映射。
"""

from enum import Enum
from typing import Any

from contract_checks.config import CheckConfig, get_config
from contract_checks.typing import CheckError

_ELLIPSIS = "..."


def field_error(item_name: Any, message: Any) -> CheckError:
    """Build the canonical single-entry error mapping.

    构建标准的单条目错误映射。

    Examples:
        >>> field_error("a", "is required")
        {'a': 'is required'}
    """
    return {item_name: message}


def type_name(cls: type) -> str:
    """Return the display name of a class / 返回类的展示名称。"""
    return getattr(cls, "__qualname__", None) or getattr(cls, "__name__", None) or repr(cls)


def _render_range(value: range) -> str:
    if not value:
        return repr(value)
    if value.step == 1:
        return f"{value.start}..{value[-1]}"
    return f"{value.start}..{value[-1]}//{value.step}"


def _render_items(values: list[Any], limit: int, config: CheckConfig, seen: frozenset[int]) -> list[str]:
    rendered = [_inspect(v, config, seen) for v in values[:limit]]
    if len(values) > limit:
        rendered.append(_ELLIPSIS)
    return rendered


def inspect_value(value: Any, *, config: CheckConfig | None = None) -> str:
    """Render a value for use inside an error message.

    渲染用于错误消息的值。

    ``repr`` based, with collections truncated after ``inspect_limit`` items
    and strings after ``printable_limit`` characters. Ranges render as
    ``first..last``; a container nested inside itself renders as ``[...]``.
    基于 ``repr``；集合超过 ``inspect_limit`` 个元素、字符串超过
    ``printable_limit`` 个字符时会被截断。range 渲染为 ``first..last``；
    自引用的容器渲染为 ``[...]``。

    Examples:
        >>> inspect_value(range(2, 5))
        '2..4'

    Args:
        value: Value to render.
            待渲染的值。
        config: Rendering config (default: process-wide config).
            渲染配置（默认使用进程级配置）。

    Returns:
        str: Rendered text.
            渲染后的文本。
    """
    return _inspect(value, config or get_config(), frozenset())


def _inspect(value: Any, cfg: CheckConfig, seen: frozenset[int]) -> str:
    limit = cfg.inspect_limit

    if isinstance(value, Enum):
        return f"{type(value).__name__}.{value.name}"
    if isinstance(value, type):
        return type_name(value)
    if isinstance(value, str):
        if len(value) > cfg.printable_limit:
            return repr(value[: cfg.printable_limit]) + _ELLIPSIS
        return repr(value)
    if isinstance(value, range):
        return _render_range(value)
    if isinstance(value, list):
        if id(value) in seen:
            return "[...]"
        return "[" + ", ".join(_render_items(value, limit, cfg, seen | {id(value)})) + "]"
    if isinstance(value, tuple) and not hasattr(value, "_fields"):
        if id(value) in seen:
            return "(...)"
        parts = _render_items(list(value), limit, cfg, seen | {id(value)})
        if len(parts) == 1:
            return f"({parts[0]},)"
        return "(" + ", ".join(parts) + ")"
    if isinstance(value, (set, frozenset)):
        if not value:
            return repr(value)
        # Sorted by rendering so messages are stable across runs.
        items = sorted(value, key=repr)
        body = "{" + ", ".join(_render_items(items, limit, cfg, seen)) + "}"
        return body if isinstance(value, set) else f"frozenset({body})"
    if type(value) is dict:
        if id(value) in seen:
            return "{...}"
        inner = seen | {id(value)}
        pairs = list(value.items())
        rendered = [f"{_inspect(k, cfg, inner)}: {_inspect(v, cfg, inner)}" for k, v in pairs[:limit]]
        if len(pairs) > limit:
            rendered.append(_ELLIPSIS)
        return "{" + ", ".join(rendered) + "}"
    return repr(value)
