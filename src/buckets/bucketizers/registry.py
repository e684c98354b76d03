"""
Light-weight registry mapping BucketizerType to concrete implementations.

Responsibilities
  - Provide a single source of truth for bucketizer lookups.
  - Expose helpers to normalise identifiers.

Usage Context
  - Use when resolving bucketizer identifiers to concrete classes.
  - Intended to back the factory helper.
"""
# 说明：维护 BucketizerType 与具体分桶策略实现类映射关系的轻量级注册表模块。
# 职责：
# - 作为策略查找与工厂创建的单一事实来源
# - 提供策略标识符（字符串/枚举/别名）的归一化与未注册策略的错误报告
# - 暴露注册表快照查询，便于工具或文档生成

from __future__ import annotations

import enum
from typing import Dict, Type, Union

from buckets.core.bucketize import Bucketizer
from buckets.core.utils.param_validation import ParamValidationError

from .custom import CustomBucketizer
from .fixed_width import FixedWidthBucketizer
from .linear import LinearBucketizer
from .quantile import QuantileBucketizer
from .range import RangeBucketizer


class BucketizerType(enum.Enum):
    """Supported bucketizer identifiers."""

    FIXED_WIDTH = "fixed_width"
    LINEAR = "linear"
    QUANTILE = "quantile"
    RANGE = "range"
    CUSTOM = "custom"

    @classmethod
    def from_str(cls, name: str) -> "BucketizerType":
        # 从字符串构造策略类型，对大小写、空格、连字符和常见别名做轻量规范化处理
        normalized = name.strip().lower().replace(" ", "_").replace("-", "_")
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls(normalized)
        except ValueError as exc:
            raise ParamValidationError(f"unknown bucketizer '{name}'") from exc


_ALIASES: Dict[str, str] = {
    "fw": "fixed_width",
    "fixed": "fixed_width",
    "fixedwidth": "fixed_width",
    "linspace": "linear",
    "quantiles": "quantile",
    "ranges": "range",
    "func": "custom",
}

# 集中维护 BucketizerType 到具体实现类的映射表
BUCKETIZER_REGISTRY: Dict[BucketizerType, Type[Bucketizer]] = {
    BucketizerType.FIXED_WIDTH: FixedWidthBucketizer,
    BucketizerType.LINEAR: LinearBucketizer,
    BucketizerType.QUANTILE: QuantileBucketizer,
    BucketizerType.RANGE: RangeBucketizer,
    BucketizerType.CUSTOM: CustomBucketizer,
}


def normalize_bucketizer(kind: Union[str, BucketizerType]) -> BucketizerType:
    """Coerce string or enum to BucketizerType, raising on unknown identifiers."""
    if isinstance(kind, BucketizerType):
        return kind
    if not isinstance(kind, str):
        raise ParamValidationError(f"bucketizer identifier must be str or BucketizerType, got {type(kind).__name__}")
    return BucketizerType.from_str(kind)


def get_bucketizer_class(kind: Union[str, BucketizerType]) -> Type[Bucketizer]:
    """Return the concrete class registered for the identifier."""
    bucketizer_type = normalize_bucketizer(kind)
    if bucketizer_type not in BUCKETIZER_REGISTRY:
        raise ParamValidationError(f"bucketizer '{bucketizer_type.value}' not registered")
    return BUCKETIZER_REGISTRY[bucketizer_type]


def registered_bucketizers_snapshot() -> Dict[str, str]:
    """Snapshot of registered bucketizers for tooling or docs."""
    return {kind.value: cls.__name__ for kind, cls in BUCKETIZER_REGISTRY.items()}
