"""
Quantile bucketizer over caller-supplied cut points.

Responsibilities:
    * assign each value to the position of the first cut point strictly greater than it
    * keep an informational quantile count alongside the cut points
"""
# 说明：分位数分桶策略（只消费调用方预先计算好的分位点，不负责计算分位点）。
# 职责：
# - 线性扫描第一个严格大于 value 的分位点，其位置即桶索引；若不存在则为 len(quantiles)
# - 值恰好等于某个分位点时归入该分位点之后的桶（分位点是下方桶的开上界）
# - n_quantiles 仅作信息用途，可通过 get_n_quantiles() 读取，不参与分桶计算
# 约定：
# - 分位点需升序排列；默认不校验，strict_validation=True 时在构造阶段校验

from __future__ import annotations

from typing import Any, Mapping, Sequence, Tuple

from buckets.core.bucketize import Bucketizer, BucketizerConfigError
from buckets.core.utils.config import get_config
from buckets.core.utils.logging import get_logger
from buckets.core.utils.param_validation import ensure

logger = get_logger(__name__)


class QuantileBucketizer(Bucketizer):
    """
    Bin values by precomputed, ascending quantile cut points.

    Bucket ``i`` holds values ``< quantiles[i]`` that are not below an earlier
    cut point; the final bucket (index ``len(quantiles)``) is unbounded above.
    """

    kind = "quantile"

    def __init__(self, quantiles: Sequence[Any], n_quantiles: int):
        self._quantiles: Tuple[Any, ...] = tuple(quantiles)
        self._n_quantiles = n_quantiles
        if get_config().strict_validation:
            self._check_sorted()
        logger.debug("Created QuantileBucketizer with %d cut points.", len(self._quantiles))

    def _check_sorted(self) -> None:
        for idx, (left, right) in enumerate(zip(self._quantiles, self._quantiles[1:])):
            ensure(
                not right < left,
                f"quantile cut points must be sorted ascending (position {idx + 1}: {right!r} < {left!r})",
                error=BucketizerConfigError,
            )

    @property
    def quantiles(self) -> Tuple[Any, ...]:
        return self._quantiles

    @property
    def n_quantiles(self) -> int:
        return self._n_quantiles

    def get_n_quantiles(self) -> int:
        return self._n_quantiles

    @property
    def num_buckets(self) -> int:
        return len(self._quantiles) + 1

    def bucketize(self, value: Any) -> int:
        for idx, quantile in enumerate(self._quantiles):
            if value < quantile:
                return idx
        return len(self._quantiles)

    def _parameters(self) -> Mapping[str, Any]:
        return {"quantiles": self._quantiles, "n_quantiles": self._n_quantiles}
