"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: config.py
@DateTime: 2026-02-08
@Docs: Rendering configuration for check messages.
校验消息渲染配置。

Configuration helpers for contract checks.
契约校验配置助手。

Checks themselves take no configuration; only the way values are rendered
inside error messages can be tuned, via function parameters or environment
variables.
校验本身不接受配置；仅错误消息中值的渲染方式可通过函数参数或环境变量调整。

Environment variables / 环境变量:
        - CONTRACT_CHECKS_INSPECT_LIMIT:
            Max number of collection items rendered in a message (default: 50).
            消息中渲染的集合元素上限（默认 50）。
        - CONTRACT_CHECKS_PRINTABLE_LIMIT:
            Max number of characters of a rendered string (default: 4096).
            渲染字符串的最大字符数（默认 4096）。

Examples:
        >>> from contract_checks.config import resolve_config
        >>> resolve_config(inspect_limit=3).inspect_limit
        3
"""

import os
from dataclasses import dataclass
from functools import lru_cache

from contract_checks.exceptions import ConfigError

DEFAULT_INSPECT_LIMIT = 50
DEFAULT_PRINTABLE_LIMIT = 4096


@dataclass(frozen=True, slots=True)
class CheckConfig:
    """Message rendering configuration.

    消息渲染配置。

    Attributes:
        inspect_limit: Max collection items rendered before ``...``.
            渲染集合时在 ``...`` 之前的最大元素数。
        printable_limit: Max characters of a rendered string.
            渲染字符串的最大字符数。
    """

    inspect_limit: int = DEFAULT_INSPECT_LIMIT
    printable_limit: int = DEFAULT_PRINTABLE_LIMIT


def _env_get(*names: str) -> str | None:
    """Get the first non-empty environment variable value.

    获取第一个非空环境变量值。

    Args:
        *names: Candidate environment variable names in priority order.
            候选环境变量名（按优先级顺序）。

    Returns:
        The first non-empty value, or None.
            返回第一个非空值；若都为空则返回 None。
    """
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip():
            return v.strip()
    return None


def _parse_limit(name: str, value: str | int) -> int:
    """
    Parse a positive integer limit.
    解析正整数上限。

    Args:
        name: Setting name (used in the error).
            配置名（用于错误信息）。
        value: Raw value.
            原始值。

    Returns:
        int: Parsed limit.
        int: 解析后的上限。

    Raises:
        ConfigError: When the value is not a positive integer.
            值不是正整数时抛出。
    """
    try:
        parsed = int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(
            message=f"Invalid {name}: {value!r} is not an integer / {name} 无效：{value!r} 不是整数",
            details={"setting": name, "value": value},
            error_code="invalid_config",
        ) from exc
    if parsed <= 0:
        raise ConfigError(
            message=f"Invalid {name}: {parsed} must be positive / {name} 无效：{parsed} 必须为正数",
            details={"setting": name, "value": parsed},
            error_code="invalid_config",
        )
    return parsed


def resolve_config(
    *,
    inspect_limit: int | None = None,
    printable_limit: int | None = None,
    env_prefix: str = "CONTRACT_CHECKS",
) -> CheckConfig:
    """Resolve configuration from parameters and environment variables.

    从参数和环境变量解析配置。

     Resolution order / 解析优先级:
        1) function parameters / 函数参数
        2) env: `{env_prefix}_INSPECT_LIMIT`, `{env_prefix}_PRINTABLE_LIMIT`
           环境变量：`{env_prefix}_INSPECT_LIMIT`、`{env_prefix}_PRINTABLE_LIMIT`
        3) defaults / 默认值

    Args:
        inspect_limit: Max collection items rendered.
            渲染集合的最大元素数。
        printable_limit: Max characters of a rendered string.
            渲染字符串的最大字符数。
        env_prefix: Prefix for environment variables.
            环境变量前缀（默认 CONTRACT_CHECKS）。

    Returns:
        A CheckConfig instance.
            返回 CheckConfig 配置实例。

    Raises:
        ConfigError: When a limit is not a positive integer.
            上限不是正整数时抛出。
    """
    raw_inspect = inspect_limit if inspect_limit is not None else _env_get(f"{env_prefix}_INSPECT_LIMIT")
    raw_printable = (
        printable_limit if printable_limit is not None else _env_get(f"{env_prefix}_PRINTABLE_LIMIT")
    )
    return CheckConfig(
        inspect_limit=_parse_limit("inspect_limit", raw_inspect) if raw_inspect is not None else DEFAULT_INSPECT_LIMIT,
        printable_limit=(
            _parse_limit("printable_limit", raw_printable) if raw_printable is not None else DEFAULT_PRINTABLE_LIMIT
        ),
    )


@lru_cache(maxsize=1)
def get_config() -> CheckConfig:
    """Return the process-wide default configuration (resolved once).

    返回进程级默认配置（仅解析一次）。

    Call ``get_config.cache_clear()`` after changing the environment.
    修改环境变量后调用 ``get_config.cache_clear()``。
    """
    return resolve_config()
