"""
Linearly spaced bucketizer with clamped indices.

Responsibilities:
    * derive the bucket width once from ``start``, ``end`` and the bucket count
    * clamp every index into ``[0, num_buckets - 1]``
"""
# 说明：线性等距分桶策略。
# 职责：
# - 构造时一次性计算 bucket_width = (end - start) / num_buckets，桶数量经 into_index 转为整数
# - 低于 start（含 NaN 等无法比较的值）一律归入桶 0；达到或超过 end 的值归入最后一个桶
# - 桶数量截断后至少为 1，否则最后一个桶的索引为负
# - 与定宽策略的区别：索引范围有界且稠密

from __future__ import annotations

from typing import Any, Mapping

from buckets.core.bucketize import Bucketizer
from buckets.core.numeric import NumericOps, resolve_ops
from buckets.core.utils.logging import get_logger
from buckets.core.utils.param_validation import ensure

logger = get_logger(__name__)


class LinearBucketizer(Bucketizer):
    """
    Bin values into ``num_buckets`` equally spaced buckets between ``start`` and ``end``.

    - Configuration
      - start: Lower edge of bucket 0.
      - end: Upper edge of the last bucket.
      - num_buckets: Desired bucket count, given as a number and truncated to an integer.

    - Behavior
      - Values not ``>= start`` map to 0; values at or beyond ``end`` map to ``num_buckets - 1``.

    - Usage Notes
      - ``num_buckets == 0`` is not guarded; the host's division-by-zero behavior applies.
      - Any other count that truncates below 1 raises ``ParamValidationError``.
    """

    kind = "linear"

    def __init__(self, start: Any, end: Any, num_buckets: Any):
        self._ops: NumericOps = resolve_ops(start, end, num_buckets)
        self._start = start
        self._end = end
        self._bucket_width = self._ops.divide(self._ops.subtract(end, start), num_buckets)
        self._num_buckets = self._ops.to_index(num_buckets)
        ensure(self._num_buckets >= 1, f"num_buckets must truncate to at least 1, got {num_buckets!r}")
        logger.debug(
            "Created LinearBucketizer(start=%r, end=%r) with %d buckets of width %r.",
            start,
            end,
            self._num_buckets,
            self._bucket_width,
        )

    @property
    def start(self) -> Any:
        return self._start

    @property
    def end(self) -> Any:
        return self._end

    @property
    def bucket_width(self) -> Any:
        return self._bucket_width

    @property
    def num_buckets(self) -> int:
        return self._num_buckets

    def bucketize(self, value: Any) -> int:
        if not value >= self._start:
            return 0
        offset = self._ops.subtract(value, self._start)
        index = self._ops.to_index(self._ops.divide(offset, self._bucket_width))
        if index < self._num_buckets:
            return index
        return self._num_buckets - 1

    def _parameters(self) -> Mapping[str, Any]:
        return {"start": self._start, "end": self._end, "num_buckets": self._num_buckets}
