"""Pluggable bucketization of ordered scalar values."""

from __future__ import annotations

from .core import (
    INDEX_MAX,
    Bucketizer,
    BucketizerConfigError,
    BucketizerInfo,
    IndexConversionError,
    IntoBuckets,
    NumericOps,
    NumericTypeError,
    ParamValidationError,
    RuntimeConfig,
    TotalFloat,
    bucket_counts,
    configure,
    configure_logging,
    get_config,
    get_logger,
    histogram,
    into_index,
    reset_config,
    resolve_ops,
)
from .bucketizers import (
    BucketizerType,
    CustomBucketizer,
    FixedWidthBucketizer,
    LinearBucketizer,
    QuantileBucketizer,
    RangeBucketizer,
    create_bucketizer,
    registered_bucketizers_snapshot,
)

__version__ = "0.1.0"

__all__ = [
    "INDEX_MAX",
    "Bucketizer",
    "BucketizerConfigError",
    "BucketizerInfo",
    "BucketizerType",
    "CustomBucketizer",
    "FixedWidthBucketizer",
    "IndexConversionError",
    "IntoBuckets",
    "LinearBucketizer",
    "NumericOps",
    "NumericTypeError",
    "ParamValidationError",
    "QuantileBucketizer",
    "RangeBucketizer",
    "RuntimeConfig",
    "TotalFloat",
    "bucket_counts",
    "configure",
    "configure_logging",
    "create_bucketizer",
    "get_config",
    "get_logger",
    "histogram",
    "into_index",
    "registered_bucketizers_snapshot",
    "reset_config",
    "resolve_ops",
]
