"""Entry point for the core library components."""

from .numeric import (
    INDEX_MAX,
    FLOAT_OPS,
    INTEGER_OPS,
    TOTAL_FLOAT_OPS,
    IndexConversionError,
    NumericOps,
    NumericTypeError,
    TotalFloat,
    into_index,
    resolve_ops,
)
from .bucketize import (
    Bucketizer,
    BucketizerConfigError,
    BucketizerInfo,
)
from .into_buckets import IntoBuckets
from .statistics import (
    bucket_counts,
    histogram,
)
from .utils import (
    ParamValidationError,
    RuntimeConfig,
    configure,
    configure_logging,
    get_config,
    get_logger,
    reset_config,
)

__all__ = [
    "INDEX_MAX",
    "FLOAT_OPS",
    "INTEGER_OPS",
    "TOTAL_FLOAT_OPS",
    "IndexConversionError",
    "NumericOps",
    "NumericTypeError",
    "TotalFloat",
    "into_index",
    "resolve_ops",
    "Bucketizer",
    "BucketizerConfigError",
    "BucketizerInfo",
    "IntoBuckets",
    "bucket_counts",
    "histogram",
    "ParamValidationError",
    "RuntimeConfig",
    "configure",
    "configure_logging",
    "get_config",
    "get_logger",
    "reset_config",
]
