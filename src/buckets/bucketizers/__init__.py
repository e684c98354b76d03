"""Concrete bucketing strategies plus registry/factory helpers."""

from .fixed_width import FixedWidthBucketizer
from .linear import LinearBucketizer
from .quantile import QuantileBucketizer
from .range import RangeBucketizer
from .custom import CustomBucketizer
from .registry import (
    BUCKETIZER_REGISTRY,
    BucketizerType,
    get_bucketizer_class,
    normalize_bucketizer,
    registered_bucketizers_snapshot,
)
from .factory import create_bucketizer

__all__ = [
    "FixedWidthBucketizer",
    "LinearBucketizer",
    "QuantileBucketizer",
    "RangeBucketizer",
    "CustomBucketizer",
    "BUCKETIZER_REGISTRY",
    "BucketizerType",
    "get_bucketizer_class",
    "normalize_bucketizer",
    "registered_bucketizers_snapshot",
    "create_bucketizer",
]
