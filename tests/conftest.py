"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: conftest.py
@DateTime: 2026-02-08
@Docs: Shared test fixtures for the contract-checks test suite.
测试套件的公共 fixtures。
"""

from collections.abc import Iterator

import pytest

from contract_checks.config import get_config


@pytest.fixture(autouse=True)
def fresh_config() -> Iterator[None]:
    """Reset the cached default config around each test.
    每个测试前后重置缓存的默认配置。
    """
    get_config.cache_clear()
    yield
    get_config.cache_clear()
