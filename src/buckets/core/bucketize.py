"""
Bucketizer abstractions shared by every bucketing strategy.

Responsibilities:
    * define the single-value capability (``bucketize``) every strategy implements
    * derive the sequence capability (``bucketize_sequence``) from it by default
    * expose lazy wrapping, bucket counts and a descriptor for logging/inspection
"""
# 说明：分桶策略的通用抽象（两级能力约定）。
# 职责：
# - 单值能力：bucketize(value) -> int，子类必须实现，要求纯函数、确定性、无副作用
# - 序列能力：bucketize_sequence(values) -> List[int]，默认逐个映射单值能力并保持顺序与长度
# - into_buckets(values)：将任意可迭代对象包装为惰性分桶迭代器（IntoBuckets）
# - describe()：返回 BucketizerInfo，便于日志与调试展示

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterable, List, Mapping, Optional

from .utils.param_validation import ParamValidationError

if TYPE_CHECKING:  # pragma: no cover
    from .into_buckets import IntoBuckets


class BucketizerConfigError(ParamValidationError):
    """Raised by strict validation when a strategy's configuration is malformed."""
    # 仅在 RuntimeConfig.strict_validation=True 时抛出（未排序的分位点、重叠/倒置区间等）


@dataclass(frozen=True)
class BucketizerInfo:
    """Lightweight descriptor used for logging and inspection."""
    # 轻量级策略描述：名称、类型标识、桶数量（None 表示无界或未知）与构造参数

    name: str
    kind: str
    num_buckets: Optional[int] = None
    parameters: Mapping[str, Any] = field(default_factory=dict)


class Bucketizer(ABC):
    """
    Abstract base class for all bucketing strategies.

    - Behavior
      - ``bucketize`` maps one value to a zero-based bucket index.
      - ``bucketize_sequence`` maps an iterable in order; output length equals input length.
      - Instances are immutable once constructed and may be shared across traversals.

    - Usage Notes
      - Subclasses implement ``bucketize``; override ``bucketize_sequence`` only when
        the override keeps per-element order and totality.
    """

    kind: str = "bucketizer"

    @abstractmethod
    def bucketize(self, value: Any) -> int:
        """Return the bucket index for a single value."""
        # 单值分桶：子类必须实现

    def bucketize_sequence(self, values: Iterable[Any]) -> List[int]:
        """Bucketize every value of ``values`` in order."""
        # 默认实现：逐个调用 bucketize，元素 i 的结果与单独调用 bucketize(values[i]) 相同
        return [self.bucketize(value) for value in values]

    def into_buckets(self, values: Iterable[Any]) -> "IntoBuckets":
        """Wrap ``values`` in a lazy iterator of bucket indices."""
        from .into_buckets import IntoBuckets

        return IntoBuckets(values, self)

    def __call__(self, value: Any) -> int:
        # 使实例可调用：等价于 bucketize(value)，便于传给 map(...) 等高阶函数
        return self.bucketize(value)

    @property
    def num_buckets(self) -> Optional[int]:
        """Declared bucket count; ``None`` when the strategy is unbounded."""
        return None

    def _parameters(self) -> Mapping[str, Any]:
        return {}

    def describe(self) -> BucketizerInfo:
        """Return a human readable summary."""
        return BucketizerInfo(
            name=self.__class__.__name__,
            kind=self.kind,
            num_buckets=self.num_buckets,
            parameters=dict(self._parameters()),
        )

    def __repr__(self) -> str:
        params = ", ".join(f"{key}={value!r}" for key, value in self._parameters().items())
        return f"{self.__class__.__name__}({params})"
