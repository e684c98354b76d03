"""
Factory helper to instantiate bucketizers from registry identifiers.

Responsibilities
  - Normalise identifiers (string/enum) via the registry.
  - Construct bucketizers with the keyword arguments their constructor accepts.

Limitations
  - Filters kwargs to the constructor signature; unknown keys are dropped.
"""
# 说明：根据注册表标识符创建分桶策略实例的工厂辅助函数。
# 职责：
# - 规范化字符串或枚举形式的策略标识符并解析为具体实现类
# - 根据构造函数签名筛选支持的参数，缺少必填参数时转为 ParamValidationError
# - 支持直接接收已有策略实例并原样返回

from __future__ import annotations

import inspect
from typing import Any, Mapping, Union

from buckets.core.bucketize import Bucketizer
from buckets.core.utils.logging import get_logger
from buckets.core.utils.param_validation import ParamValidationError

from .registry import BucketizerType, get_bucketizer_class

logger = get_logger(__name__)


def _filter_kwargs(signature_obj: inspect.Signature, values: Mapping[str, Any]) -> dict[str, Any]:
    """Keep only kwargs that the callable accepts."""
    return {k: v for k, v in values.items() if k in signature_obj.parameters}


def create_bucketizer(kind: Union[str, BucketizerType, Bucketizer], **params: Any) -> Bucketizer:
    """
    Create a bucketizer by identifier.

    Args:
        kind: BucketizerType or string identifier (aliases such as ``"fw"`` are accepted),
            or an existing Bucketizer which is returned unchanged.
        **params: Constructor parameters, e.g. ``width``/``offset`` for fixed-width or
            ``start``/``end``/``num_buckets`` for linear.
    """
    if isinstance(kind, Bucketizer):
        return kind

    bucketizer_cls = get_bucketizer_class(kind)
    init_sig = inspect.signature(bucketizer_cls.__init__)
    init_kwargs = _filter_kwargs(init_sig, params)
    dropped = sorted(set(params) - set(init_kwargs))
    if dropped:
        logger.debug("Ignoring unsupported parameters for %s: %s", bucketizer_cls.__name__, dropped)
    try:
        init_sig.bind(None, **init_kwargs)
    except TypeError as exc:
        raise ParamValidationError(f"invalid parameters for {bucketizer_cls.__name__}: {exc}") from exc

    bucketizer = bucketizer_cls(**init_kwargs)
    logger.debug("Created %r via factory.", bucketizer)
    return bucketizer
