"""
Property-based tests for bucketizers and the lazy adapter.
"""
# 说明：分桶策略与惰性迭代器的属性测试。
# 覆盖：
# - 序列分桶与逐个单值分桶结果一致（长度、顺序）
# - 同一实例重复调用结果确定
# - 定宽网格、线性裁剪范围、分位数单调性、区间回退与自定义委托
# - 惰性迭代器的结果与序列分桶一致，耗尽状态不可恢复

import pytest
from hypothesis import given, strategies as st

from buckets.bucketizers import (
    CustomBucketizer,
    FixedWidthBucketizer,
    LinearBucketizer,
    QuantileBucketizer,
    RangeBucketizer,
)
from buckets.core.into_buckets import IntoBuckets


# ------------------------------------------------------------------ Basic Types
def finite_floats(min_value=-1e6, max_value=1e6):
    # 有限浮点数，排除 NaN/inf 以便比较期望值
    return st.floats(min_value=min_value, max_value=max_value, allow_nan=False, allow_infinity=False)


@st.composite
def float_samples(draw, min_size=0, max_size=50):
    return draw(st.lists(finite_floats(), min_size=min_size, max_size=max_size))


# ------------------------------------------------------------------ Configurations
@st.composite
def sorted_cut_points(draw, max_size=10):
    # 升序分位点（允许重复）
    return sorted(draw(st.lists(finite_floats(), min_size=0, max_size=max_size)))


@st.composite
def contiguous_ranges(draw, max_size=8):
    # 首尾相接的左闭右开区间：[e0, e1), [e1, e2), ...
    edges = sorted(set(draw(st.lists(finite_floats(), min_size=2, max_size=max_size + 1))))
    if len(edges) < 2:
        edges = [edges[0], edges[0] + 1.0]
    return list(zip(edges[:-1], edges[1:]))


# ------------------------------------------------------------------ Bucketizers
@st.composite
def bucketizers(draw):
    # 随机选择一种策略并生成合法参数
    kind = draw(st.sampled_from(["fixed_width", "linear", "quantile", "range", "custom"]))
    if kind == "fixed_width":
        width = draw(st.floats(min_value=0.01, max_value=1e3))
        return FixedWidthBucketizer(width, draw(finite_floats()))
    if kind == "linear":
        start = draw(finite_floats())
        span = draw(st.floats(min_value=0.01, max_value=1e4))
        count = draw(st.integers(min_value=1, max_value=100))
        return LinearBucketizer(start, start + span, float(count))
    if kind == "quantile":
        cuts = draw(sorted_cut_points())
        return QuantileBucketizer(cuts, len(cuts) + 1)
    if kind == "range":
        return RangeBucketizer(draw(contiguous_ranges()))
    modulus = draw(st.integers(min_value=1, max_value=16))
    return CustomBucketizer(lambda value: int(abs(value)) % modulus, num_buckets=modulus)


# ------------------------------------------------------------------ Properties
@given(bucketizers(), float_samples())
def test_sequence_matches_single_values(bucketizer, values):
    result = bucketizer.bucketize_sequence(values)
    assert len(result) == len(values)
    assert result == [bucketizer.bucketize(value) for value in values]
    assert all(isinstance(index, int) and index >= 0 for index in result)


@given(bucketizers(), finite_floats())
def test_bucketize_is_deterministic(bucketizer, value):
    first = bucketizer.bucketize(value)
    assert all(bucketizer.bucketize(value) == first for _ in range(3))


@given(bucketizers(), float_samples())
def test_declared_bucket_count_bounds_indices(bucketizer, values):
    if bucketizer.num_buckets is None:
        return
    assert all(index < bucketizer.num_buckets for index in bucketizer.bucketize_sequence(values))


@given(
    st.integers(min_value=1, max_value=1000),
    st.integers(min_value=-1000, max_value=1000),
    st.integers(min_value=0, max_value=50),
)
def test_fixed_width_grid(width, offset, count):
    bucketizer = FixedWidthBucketizer(width, offset)
    grid = [offset + k * width for k in range(count)]
    assert bucketizer.bucketize_sequence(grid) == list(range(count))


@given(
    finite_floats(),
    st.floats(min_value=0.01, max_value=1e4),
    st.integers(min_value=1, max_value=100),
    finite_floats(),
)
def test_linear_clamps_to_bucket_range(start, span, count, value):
    end = start + span
    bucketizer = LinearBucketizer(start, end, float(count))
    index = bucketizer.bucketize(value)
    assert 0 <= index <= count - 1
    if value < start:
        assert index == 0
    if value >= end:
        assert index == count - 1


@given(sorted_cut_points(), finite_floats(), finite_floats())
def test_quantile_is_monotonic(cuts, a, b):
    bucketizer = QuantileBucketizer(cuts, len(cuts) + 1)
    low, high = min(a, b), max(a, b)
    assert bucketizer.bucketize(low) <= bucketizer.bucketize(high)
    # 桶索引等于严格不大于 value 的分位点个数
    assert bucketizer.bucketize(a) == sum(1 for cut in cuts if not a < cut)


@given(contiguous_ranges(), finite_floats())
def test_range_matches_containing_interval_or_last(ranges, value):
    bucketizer = RangeBucketizer(ranges)
    index = bucketizer.bucketize(value)
    containing = [i for i, (lower, upper) in enumerate(ranges) if lower <= value < upper]
    if containing:
        assert index == containing[0]
    else:
        assert index == len(ranges) - 1


@given(st.lists(st.integers(min_value=-10**6, max_value=10**6), max_size=30))
def test_custom_equals_function(values):
    func = lambda value: abs(value) % 7  # noqa: E731
    bucketizer = CustomBucketizer(func)
    assert bucketizer.bucketize_sequence(values) == [func(value) for value in values]


@given(bucketizers(), float_samples(), st.integers(min_value=1, max_value=5))
def test_adapter_matches_sequence_and_stays_exhausted(bucketizer, values, extra_pulls):
    adapter = IntoBuckets(iter(values), bucketizer)
    assert list(adapter) == bucketizer.bucketize_sequence(values)
    assert adapter.exhausted
    for _ in range(extra_pulls):
        with pytest.raises(StopIteration):
            next(adapter)
