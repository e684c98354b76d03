"""
Fixed-width bucketizer.

Responsibilities:
    * split the number line into unbounded width-``width`` intervals starting at ``offset``
    * truncate ``(value - offset) / width`` into a bucket index
"""
# 说明：定宽分桶策略。
# 职责：
# - index = into_index((value - offset) / width)，两端均无界、不做裁剪
# - 恰好落在边界上的值归入该边界开启的（编号更高的）桶
# - 任何低于 offset 的值（含 offset 左侧不足一个 width 的部分）都交给负数索引策略
# - width 为 0 属于调用方错误，不做防护，宿主数值类型的除零行为原样传播

from __future__ import annotations

from typing import Any, Mapping

from buckets.core.bucketize import Bucketizer
from buckets.core.numeric import NumericOps, negative_index, resolve_ops
from buckets.core.utils.logging import get_logger

logger = get_logger(__name__)


class FixedWidthBucketizer(Bucketizer):
    """
    Bin values into fixed-width buckets.

    - Configuration
      - width: Width of every bucket; keeping it positive and nonzero is the caller's contract.
      - offset: Left edge of bucket 0.

    - Behavior
      - ``bucketize(offset + k * width) == k`` for every ``k >= 0``.
      - Values below ``offset`` follow the negative index policy of the runtime config.

    - Usage Notes
      - Integer arguments use truncating integer division; floats use true division.
    """

    kind = "fixed_width"

    def __init__(self, width: Any, offset: Any = 0):
        self._ops: NumericOps = resolve_ops(width, offset)
        self._width = width
        self._offset = offset
        logger.debug("Created FixedWidthBucketizer(width=%r, offset=%r) using %s ops.", width, offset, self._ops.name)

    @property
    def width(self) -> Any:
        return self._width

    @property
    def offset(self) -> Any:
        return self._offset

    def bucketize(self, value: Any) -> int:
        # 向下取整语义：offset 左侧的任何值都不属于桶 0
        if value < self._offset:
            return negative_index(value)
        adjusted = self._ops.subtract(value, self._offset)
        return self._ops.to_index(self._ops.divide(adjusted, self._width))

    def _parameters(self) -> Mapping[str, Any]:
        return {"width": self._width, "offset": self._offset}
