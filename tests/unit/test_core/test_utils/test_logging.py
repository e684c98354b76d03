"""
Unit tests for logging utilities.
"""
# 说明：日志配置与 logger 获取入口的单元测试。
# 覆盖：
# - get_logger(...)：返回按名称区分的标准 logger
# - 负数索引饱和时在 DEBUG 级别留下日志

import logging

from buckets.core.numeric import into_index
from buckets.core.utils import configure_logging, get_logger


def test_get_logger_returns_named_logger() -> None:
    configure_logging(level="INFO")
    logger = get_logger("buckets.test")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "buckets.test"


def test_saturation_is_logged_at_debug(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="buckets.core.numeric"):
        assert into_index(-4) == 0
    assert "Saturated negative value -4" in caplog.text


def test_factory_logs_creation(caplog) -> None:
    from buckets.bucketizers import create_bucketizer

    with caplog.at_level(logging.DEBUG, logger="buckets.bucketizers.factory"):
        create_bucketizer("fw", width=2, offset=0)
    assert "FixedWidthBucketizer(width=2, offset=0)" in caplog.text
