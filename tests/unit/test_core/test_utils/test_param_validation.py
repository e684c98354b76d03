"""
Unit tests for validation helpers.
"""
# 说明：参数验证工具（ensure / ensure_type / ensure_callable）的单元测试。

import pytest

from buckets.core.utils import ParamValidationError, ensure, ensure_callable, ensure_type


def test_ensure_passes_and_fails() -> None:
    ensure(True, "should not raise")
    with pytest.raises(ParamValidationError):
        ensure(False, "error")
    with pytest.raises(KeyError):
        ensure(False, "custom", error=KeyError)


def test_ensure_type_checks() -> None:
    ensure_type(5, (int,), label="value")
    with pytest.raises(ParamValidationError, match="value must be instance of int"):
        ensure_type("text", (int,), label="value")


def test_ensure_callable() -> None:
    ensure_callable(len, label="func")
    with pytest.raises(ParamValidationError, match="func must be callable"):
        ensure_callable(3, label="func")
