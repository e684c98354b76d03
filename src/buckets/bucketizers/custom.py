"""
Bucketizer delegating to a caller-supplied function.
"""
# 说明：自定义分桶策略，让临时或领域特定的分桶逻辑复用同一套能力约定（序列分桶、惰性迭代、直方图）。

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

from buckets.core.bucketize import Bucketizer
from buckets.core.utils.param_validation import ensure_callable


class CustomBucketizer(Bucketizer):
    """Wrap ``func(value) -> index``; correctness is the caller's responsibility."""

    kind = "custom"

    def __init__(self, func: Callable[[Any], int], *, num_buckets: Optional[int] = None):
        ensure_callable(func, label="func")
        self._func = func
        self._num_buckets = num_buckets  # 可选：仅用于 describe/histogram 补零

    @property
    def func(self) -> Callable[[Any], int]:
        return self._func

    @property
    def num_buckets(self) -> Optional[int]:
        return self._num_buckets

    def bucketize(self, value: Any) -> int:
        return self._func(value)

    def _parameters(self) -> Mapping[str, Any]:
        return {"func": getattr(self._func, "__name__", repr(self._func))}
