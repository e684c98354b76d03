"""
Explicit range bucketizer.
"""
# 说明：显式区间分桶策略。
# 职责：
# - 每个桶由 (lower_inclusive, upper_exclusive) 区间描述，按给定顺序对应桶索引
# - 线性扫描第一个满足 lower <= value < upper 的区间并返回其位置
# - 所有区间都不匹配时回退到最后一个桶（len(ranges) - 1），而不是抛错
# 约定：
# - 区间不重叠、按期望顺序给出由调用方负责；strict_validation=True 时校验倒置与重叠
# - ranges 必须非空，否则回退索引不存在

from __future__ import annotations

from typing import Any, Mapping, Sequence, Tuple

from buckets.core.bucketize import Bucketizer, BucketizerConfigError
from buckets.core.utils.config import get_config
from buckets.core.utils.logging import get_logger
from buckets.core.utils.param_validation import ensure

logger = get_logger(__name__)

Interval = Tuple[Any, Any]


class RangeBucketizer(Bucketizer):
    """
    Bin values by a list of half-open ``[lower, upper)`` ranges, one per bucket.

    - Configuration
      - ranges: Non-empty sequence of ``(lower_inclusive, upper_exclusive)`` pairs.

    - Behavior
      - Returns the position of the first range containing the value.
      - Values covered by no range fall back to the last bucket.
    """

    kind = "range"

    def __init__(self, ranges: Sequence[Interval]):
        normalized = []
        for item in ranges:
            ensure(len(item) == 2, f"each range must be a (lower, upper) pair, got {item!r}")
            lower, upper = item
            normalized.append((lower, upper))
        ensure(len(normalized) > 0, "RangeBucketizer requires at least one range")
        self._ranges: Tuple[Interval, ...] = tuple(normalized)
        if get_config().strict_validation:
            self._check_ranges()
        logger.debug("Created RangeBucketizer with %d ranges.", len(self._ranges))

    def _check_ranges(self) -> None:
        for idx, (lower, upper) in enumerate(self._ranges):
            ensure(
                lower < upper,
                f"range {idx} is empty or inverted: ({lower!r}, {upper!r})",
                error=BucketizerConfigError,
            )
        ordered = sorted(self._ranges, key=lambda pair: pair[0])
        for (_, prev_upper), (lower, _) in zip(ordered, ordered[1:]):
            ensure(
                not lower < prev_upper,
                f"ranges overlap: {lower!r} < {prev_upper!r}",
                error=BucketizerConfigError,
            )

    @property
    def ranges(self) -> Tuple[Interval, ...]:
        return self._ranges

    @property
    def num_buckets(self) -> int:
        return len(self._ranges)

    def bucketize(self, value: Any) -> int:
        for idx, (lower, upper) in enumerate(self._ranges):
            if lower <= value < upper:
                return idx
        return len(self._ranges) - 1

    def _parameters(self) -> Mapping[str, Any]:
        return {"ranges": self._ranges}
