"""Shared pytest configuration and path setup for test modules."""

import sys
from pathlib import Path

import pytest

# Ensure repo root and src/ are on sys.path for all tests
_ROOT = Path(__file__).resolve().parents[1]
_SRC = _ROOT / "src"
for p in (str(_ROOT), str(_SRC)):
    if p not in sys.path:
        sys.path.insert(0, p)

from buckets.core.utils import reset_config  # noqa: E402


@pytest.fixture(autouse=True)
def _isolated_config():
    # 每个测试结束后恢复全局运行时配置，避免 strict_validation 等开关在测试间泄漏
    reset_config()
    yield
    reset_config()
