"""
Numeric helpers for turning bucket arithmetic into bucket indices.

Responsibilities:
    * convert integer / floating / order-total values into non-negative indices
    * provide ``TotalFloat``, a float wrapper with a total order over all bit patterns
    * describe the arithmetic a strategy needs (``NumericOps``) and pick it per input type
"""
# 说明：分桶运算的数值层。
# 职责：
# - into_index(...)：截断式地把策略内部的数值结果转换为非负整数桶索引（小数部分直接丢弃）
# - TotalFloat：对所有 IEEE-754 位模式定义全序的浮点包装（-NaN < -inf < ... < -0.0 < +0.0 < ... < +inf < +NaN）
# - NumericOps / resolve_ops(...)：按构造参数类型选择减法、除法与索引转换的实现，注入到算术型策略中
# 约定：
# - NaN -> 0；超过 INDEX_MAX（含 +inf）饱和为 INDEX_MAX
# - 负数按 RuntimeConfig.negative_index_policy 处理："saturate" 返回 0，"raise" 抛出 IndexConversionError
# - 整数类型的除法采用向零截断，与定宽整数语义一致

from __future__ import annotations

import functools
import math
import operator
from dataclasses import dataclass
from typing import Any, Callable

import numpy as np

from .utils.config import get_config
from .utils.logging import get_logger

logger = get_logger(__name__)

INDEX_MAX = int(np.iinfo(np.uint64).max)
# 最大桶索引：与 64 位无符号整数上限一致

_INTEGRAL_TYPES = (int, np.integer)
_FLOATING_TYPES = (float, np.floating)


class NumericTypeError(TypeError):
    """Raised when a value has no numeric index conversion."""


class IndexConversionError(ValueError):
    """Raised when a negative quantity is converted under the ``"raise"`` policy."""


def _total_order_key(value: float) -> int:
    # IEEE-754 totalOrder：负数翻转低 63 位，使有符号整数比较与浮点全序一致
    bits = int(np.array([value], dtype=np.float64).view(np.int64)[0])
    if bits < 0:
        return bits ^ 0x7FFFFFFFFFFFFFFF
    return bits


def _is_plain_number(value: Any) -> bool:
    return isinstance(value, _INTEGRAL_TYPES + _FLOATING_TYPES) and not isinstance(value, (bool, np.bool_))


@functools.total_ordering
class TotalFloat:
    """
    Immutable float wrapper ordered by IEEE-754 totalOrder.

    - Behavior
      - Every bit pattern has a position: ``-0.0 < +0.0`` and NaN sorts above ``+inf``
        (negative NaN below ``-inf``), so sorted boundary scans are well defined.
      - Equality follows the same key, so ``TotalFloat(nan) == TotalFloat(nan)``; a plain NaN
        compares unequal. Non-NaN values hash like the equal ``float``, so mixed sets and
        dict lookups agree with ``==``.
      - Arithmetic returns ``TotalFloat``; division follows IEEE semantics
        (``x / 0.0`` is ``inf`` or ``nan`` instead of raising).
    """

    __slots__ = ("_value", "_key")

    def __init__(self, value: Any = 0.0):
        if isinstance(value, TotalFloat):
            value = value.value
        if not _is_plain_number(value):
            raise NumericTypeError(f"TotalFloat requires a real number, got {type(value).__name__}")
        self._value = float(value)
        self._key = _total_order_key(self._value)

    @property
    def value(self) -> float:
        return self._value

    @property
    def is_nan(self) -> bool:
        return math.isnan(self._value)

    @staticmethod
    def _coerce(other: Any) -> Any:
        # 与 int/float/numpy 数值混合运算时先包装为 TotalFloat；其他类型交由 Python 处理
        if isinstance(other, TotalFloat):
            return other
        if _is_plain_number(other):
            return TotalFloat(other)
        return NotImplemented

    def __eq__(self, other: Any) -> bool:
        # 与普通 NaN 比较沿用 float 语义（不相等），保证 == 与 hash 一致
        if not isinstance(other, TotalFloat) and _is_plain_number(other) and math.isnan(other):
            return False
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._key == other._key

    def __lt__(self, other: Any) -> bool:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._key < other._key

    def __hash__(self) -> int:
        # 非 NaN 与等值的 int/float 哈希一致；NaN 仅与 TotalFloat NaN 相等，按位模式哈希
        if math.isnan(self._value):
            return hash(self._key)
        return hash(self._value)

    def __sub__(self, other: Any) -> "TotalFloat":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return TotalFloat(self._value - other._value)

    def __rsub__(self, other: Any) -> "TotalFloat":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return TotalFloat(other._value - self._value)

    def __add__(self, other: Any) -> "TotalFloat":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return TotalFloat(self._value + other._value)

    __radd__ = __add__

    def __mul__(self, other: Any) -> "TotalFloat":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return TotalFloat(self._value * other._value)

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> "TotalFloat":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return TotalFloat(_ieee_divide(self._value, other._value))

    def __rtruediv__(self, other: Any) -> "TotalFloat":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return TotalFloat(_ieee_divide(other._value, self._value))

    def __neg__(self) -> "TotalFloat":
        return TotalFloat(-self._value)

    def __abs__(self) -> "TotalFloat":
        return TotalFloat(abs(self._value))

    def __float__(self) -> float:
        return self._value

    def __trunc__(self) -> int:
        return math.trunc(self._value)

    def __repr__(self) -> str:
        return f"TotalFloat({self._value!r})"


def _ieee_divide(numerator: float, denominator: float) -> float:
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


def negative_index(value: Any) -> int:
    """Apply the configured negative index policy to a value below bucket 0."""
    if get_config().negative_index_policy == "raise":
        raise IndexConversionError(f"cannot convert negative value {value!r} into a bucket index")
    logger.debug("Saturated negative value %r to bucket index 0.", value)
    return 0


def into_index(value: Any) -> int:
    """
    Truncate a numeric quantity into a non-negative bucket index.

    Supports Python ``int``/``float``, numpy integer and floating scalars and
    ``TotalFloat``. The fractional part is discarded; NaN becomes ``0`` and
    anything at or above ``INDEX_MAX`` saturates to ``INDEX_MAX``. Negative
    inputs follow ``RuntimeConfig.negative_index_policy``.
    """
    if isinstance(value, TotalFloat):
        value = value.value
    if not _is_plain_number(value):
        raise NumericTypeError(f"no index conversion for type {type(value).__name__}")

    if isinstance(value, _INTEGRAL_TYPES):
        numeric = int(value)
        if numeric < 0:
            return negative_index(value)
        return min(numeric, INDEX_MAX)

    numeric = float(value)
    if math.isnan(numeric):
        return 0
    if numeric >= INDEX_MAX:
        return INDEX_MAX
    if numeric <= -1.0:
        return negative_index(value)
    return math.trunc(numeric)


def _truncating_divide(numerator: Any, denominator: Any) -> Any:
    # 整数除法向零截断（区别于 Python // 的向下取整）；混入浮点值时退回真除法
    if not (isinstance(numerator, _INTEGRAL_TYPES) and isinstance(denominator, _INTEGRAL_TYPES)):
        return numerator / denominator
    quotient = abs(int(numerator)) // abs(int(denominator))
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


@dataclass(frozen=True)
class NumericOps:
    """Arithmetic capability injected into strategies that compute indices."""
    # 策略所需的数值能力：比较直接使用元素自身的 < / >=，其余运算在此显式给出

    name: str
    subtract: Callable[[Any, Any], Any]
    divide: Callable[[Any, Any], Any]
    to_index: Callable[[Any], int] = into_index


INTEGER_OPS = NumericOps(name="integer", subtract=operator.sub, divide=_truncating_divide)
FLOAT_OPS = NumericOps(name="float", subtract=operator.sub, divide=operator.truediv)
TOTAL_FLOAT_OPS = NumericOps(name="total_float", subtract=operator.sub, divide=operator.truediv)


def resolve_ops(*samples: Any) -> NumericOps:
    """Pick the arithmetic for a strategy from its constructor arguments."""
    # 优先级：TotalFloat > 浮点 > 整数；出现非数值参数直接报错
    for sample in samples:
        if not isinstance(sample, TotalFloat) and not _is_plain_number(sample):
            raise NumericTypeError(f"unsupported numeric type {type(sample).__name__}")
    if any(isinstance(sample, TotalFloat) for sample in samples):
        return TOTAL_FLOAT_OPS
    if any(isinstance(sample, _FLOATING_TYPES) for sample in samples):
        return FLOAT_OPS
    return INTEGER_OPS
