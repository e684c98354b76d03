"""
Counting helpers built on top of bucket indices.

Responsibilities:
    * count occurrences of bucket indices (numpy ``bincount``)
    * build a histogram for a bucketizer without materialising the indices twice
"""
# 说明：基于桶索引的计数工具。
# 职责：
# - bucket_counts(...)：统计每个桶索引出现的次数，返回 numpy 整数数组
# - histogram(...)：用惰性分桶迭代器为一组数值生成直方图；策略声明了桶数量时按该数量补零

from __future__ import annotations

from typing import Any, Iterable

import numpy as np

from .bucketize import Bucketizer
from .utils.param_validation import ensure, ensure_type

_COUNTABLE_MAX = int(np.iinfo(np.int64).max)


def bucket_counts(indices: Iterable[int], *, minlength: int = 0) -> np.ndarray:
    """Return how many times each bucket index occurs."""
    # np.bincount 要求一维非负整数；空输入得到长度为 minlength 的全零数组
    ensure(minlength >= 0, "minlength must be non-negative")
    collected = [int(index) for index in indices]
    ensure(all(index >= 0 for index in collected), "bucket indices must be non-negative")
    # 饱和索引（最高 INDEX_MAX）超出 int64，无法计数
    ensure(
        all(index <= _COUNTABLE_MAX for index in collected),
        f"bucket indices above {_COUNTABLE_MAX} cannot be counted",
    )
    return np.bincount(np.asarray(collected, dtype=np.int64), minlength=minlength)


def histogram(bucketizer: Bucketizer, values: Iterable[Any]) -> np.ndarray:
    """Bucketize ``values`` lazily and return per-bucket counts."""
    ensure_type(bucketizer, (Bucketizer,), label="bucketizer")
    minlength = bucketizer.num_buckets or 0
    return bucket_counts(bucketizer.into_buckets(values), minlength=minlength)
