"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: exceptions.py
@DateTime: 2026-02-08
@Docs: Contract checks error hierarchy.
契约校验异常体系。

Check failures are returned as data and never raised; these exceptions only
cover misuse around the checks (e.g. invalid configuration).
校验失败以数据形式返回，不会抛出；这里的异常仅用于校验之外的误用（如配置错误）。
"""

from typing import Any


class ContractChecksError(Exception):
    """
    Contract checks error.
    契约校验异常。

    Attributes:
        message: Error message.
        message: 错误消息。
        details: Error details.
        details: 错误详情。
        error_code: Stable error code.
        error_code: 稳定错误码。
    """

    def __init__(
        self,
        *,
        message: str,
        details: Any | None = None,
        error_code: str = "contract_checks_error",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details
        self.error_code = error_code


class ConfigError(ContractChecksError):
    """
    Configuration error.
    配置错误。
    """
