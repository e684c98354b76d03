"""
Lazy bucketizing iterator.

``IntoBuckets`` owns a source iterator and a bucketizer and yields one bucket
index per pull, without building an intermediate collection.
"""
# 说明：惰性分桶迭代器。
# 职责：
# - 构造时对 source 调用 iter(...) 并独占持有该迭代器与分桶策略
# - 每次 __next__ 恰好从源拉取一个元素并调用一次 bucketize，不预读、不缓冲
# - 源耗尽后进入 Exhausted 状态，此后的所有拉取都直接结束（不可重启）

from __future__ import annotations

import operator
from typing import Any, Iterable, Iterator

from .bucketize import Bucketizer
from .utils.logging import get_logger
from .utils.param_validation import ensure_type

logger = get_logger(__name__)


class IntoBuckets(Iterator[int]):
    """
    Iterator adapter mapping a source sequence to bucket indices.

    - Configuration
      - source: Any iterable; it is converted with ``iter`` and consumed by this adapter only.
      - bucketizer: Strategy used for every element.

    - Behavior
      - Active until the source signals end-of-sequence; Exhausted afterwards.
      - Once Exhausted, every further ``next`` raises ``StopIteration``.

    - Usage Notes
      - Dropping a partially consumed adapter is safe; the source simply stays partially consumed.
    """

    def __init__(self, source: Iterable[Any], bucketizer: Bucketizer):
        ensure_type(bucketizer, (Bucketizer,), label="bucketizer")
        self._source = iter(source)
        self._bucketizer = bucketizer
        self._exhausted = False

    @property
    def bucketizer(self) -> Bucketizer:
        return self._bucketizer

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def __iter__(self) -> "IntoBuckets":
        return self

    def __next__(self) -> int:
        if self._exhausted:
            raise StopIteration
        try:
            value = next(self._source)
        except StopIteration:
            self._exhausted = True
            logger.debug("Source exhausted for %s.", self._bucketizer.__class__.__name__)
            raise
        return self._bucketizer.bucketize(value)

    def __length_hint__(self) -> int:
        # 仅转发源迭代器的长度提示，不触发任何拉取
        if self._exhausted:
            return 0
        return operator.length_hint(self._source)
