"""
Integration tests combining factory, lazy adapter, statistics and configuration.
"""
# 说明：端到端集成测试：工厂创建策略 -> 惰性迭代器分桶 -> numpy 计数；以及运行时配置对整条链路的影响。

import itertools

import numpy as np
import pytest

from buckets import (
    IndexConversionError,
    TotalFloat,
    configure,
    create_bucketizer,
    histogram,
)


def test_feature_binning_pipeline() -> None:
    rng = np.random.default_rng(7)
    values = rng.uniform(0.0, 100.0, size=1000)
    bucketizer = create_bucketizer("linear", start=0.0, end=100.0, num_buckets=10.0)

    counts = histogram(bucketizer, values)
    assert counts.shape == (10,)
    assert int(counts.sum()) == 1000
    np.testing.assert_array_equal(
        counts,
        np.bincount((values / 10.0).astype(int).clip(0, 9), minlength=10),
    )


def test_adapter_composes_with_itertools() -> None:
    bucketizer = create_bucketizer("fixed_width", width=10, offset=0)
    # 无限源：只拉取需要的元素
    indices = bucketizer.into_buckets(itertools.count(0, 3))
    assert list(itertools.islice(indices, 6)) == [0, 0, 0, 0, 1, 1]
    assert not indices.exhausted


def test_quantile_over_total_floats() -> None:
    cuts = sorted(TotalFloat(v) for v in (0.75, 0.25, 0.5))
    bucketizer = create_bucketizer("quantile", quantiles=cuts, n_quantiles=4)
    data = [TotalFloat(v) for v in (0.1, 0.25, 0.6, float("nan"), 0.9)]
    assert list(bucketizer.into_buckets(data)) == [0, 1, 2, 3, 3]


def test_runtime_config_applies_to_pipeline() -> None:
    bucketizer = create_bucketizer("fixed_width", width=1.0, offset=0.0)
    assert bucketizer.bucketize_sequence([-3.0, 2.5]) == [0, 2]
    configure(negative_index_policy="raise")
    with pytest.raises(IndexConversionError):
        list(bucketizer.into_buckets([2.5, -3.0]))
