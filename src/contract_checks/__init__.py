"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-02-08
@Docs: Package exports for contract_checks.
contract_checks 包导出定义。
"""

from contract_checks.checks import (
    CHECKS,
    INVALID,
    Invalid,
    adapt_func_result,
    check_allow_nil,
    check_equals,
    check_exactly,
    check_format,
    check_func,
    check_in,
    check_not_in,
    check_regex,
    check_required,
    check_struct,
    check_subset_of,
    check_type,
    run_check,
)
from contract_checks.comparators import LengthComparator, NumericComparator
from contract_checks.config import CheckConfig, get_config, resolve_config
from contract_checks.exceptions import ConfigError, ContractChecksError
from contract_checks.length import check_length
from contract_checks.numericality import check_numericality
from contract_checks.record import MISSING, Lookup, as_record, check_item_present, get_check_item
from contract_checks.rendering import field_error, inspect_value
from contract_checks.type_validation import ValueType

__all__ = [
    "CHECKS",
    "run_check",
    "check_required",
    "check_type",
    "check_numericality",
    "check_in",
    "check_not_in",
    "check_format",
    "check_regex",
    "check_length",
    "check_struct",
    "check_func",
    "check_equals",
    "check_exactly",
    "check_allow_nil",
    "check_subset_of",
    "Invalid",
    "INVALID",
    "adapt_func_result",
    "MISSING",
    "Lookup",
    "as_record",
    "get_check_item",
    "check_item_present",
    "NumericComparator",
    "LengthComparator",
    "ValueType",
    "field_error",
    "inspect_value",
    "CheckConfig",
    "resolve_config",
    "get_config",
    "ContractChecksError",
    "ConfigError",
]
