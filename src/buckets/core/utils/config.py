"""
Runtime configuration utilities.

Centralises the library's tunable options and exposes helpers to read
from environment variables or update settings at runtime.
"""
# 说明：运行时配置管理工具，集中管理分桶库的可调选项，并支持环境变量覆写与运行期更新。
# 职责：
# - RuntimeConfig：封装严格校验开关、负数索引处理策略、日志等级等配置项
# - load_from_env(...)：按统一前缀（BUCKETS_）从环境变量加载并解析配置值
# - get_config()：获取全局 RuntimeConfig 单例，作为库级默认配置入口
# - configure(...) / reset_config()：更新或恢复全局配置
# 约定：
# - 布尔类环境变量使用 {"1", "true", "yes"}（大小写不敏感）视为 True
# - 未知配置键在 update(...) 中会触发 AttributeError，避免静默吞错

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from typing import Any, Dict

from .param_validation import ensure

NEGATIVE_INDEX_POLICIES = ("saturate", "raise")


@dataclass
class RuntimeConfig:
    strict_validation: bool = False
    negative_index_policy: str = "saturate"
    log_level: str = field(default_factory=lambda: os.environ.get("BUCKETS_LOG_LEVEL", "INFO"))
    extra: Dict[str, Any] = field(default_factory=dict)

    def update(self, **kwargs: Any) -> None:
        # 按关键字参数更新当前配置实例，未知字段名将显式报错
        for key, value in kwargs.items():
            if not hasattr(self, key):
                raise AttributeError(f"unknown config option '{key}'")
            if key == "negative_index_policy":
                _check_policy(value)
            setattr(self, key, value)

    def load_from_env(self, prefix: str = "BUCKETS_") -> None:
        # 从带有指定前缀的环境变量中加载配置，并进行类型转换后写回实例字段
        for key in ("STRICT_VALIDATION", "NEGATIVE_INDEX_POLICY", "LOG_LEVEL"):
            env_key = f"{prefix}{key}"
            if env_key not in os.environ:
                continue    # 未设置对应环境变量时保持当前配置值不变
            value: Any = os.environ[env_key]
            if key == "STRICT_VALIDATION":
                value = value.lower() in {"1", "true", "yes"}
            elif key == "NEGATIVE_INDEX_POLICY":
                value = value.lower()
                _check_policy(value)
            setattr(self, key.lower(), value)


def _check_policy(value: Any) -> None:
    ensure(
        value in NEGATIVE_INDEX_POLICIES,
        f"negative_index_policy must be one of {NEGATIVE_INDEX_POLICIES}, got {value!r}",
    )


# 全局配置单例，用作库内默认的运行时配置
_GLOBAL_CONFIG = RuntimeConfig()


def get_config() -> RuntimeConfig:
    # 返回全局 RuntimeConfig 实例，供调用方读取或在本进程内共享配置
    return _GLOBAL_CONFIG


def configure(**kwargs: Any) -> RuntimeConfig:
    # 以关键字参数更新全局配置，并返回更新后的实例（便于链式调用或调试）
    _GLOBAL_CONFIG.update(**kwargs)
    return _GLOBAL_CONFIG


def reset_config() -> RuntimeConfig:
    # 将全局配置恢复为默认值（主要供测试隔离使用），保持单例对象身份不变
    defaults = RuntimeConfig()
    for item in fields(RuntimeConfig):
        setattr(_GLOBAL_CONFIG, item.name, getattr(defaults, item.name))
    return _GLOBAL_CONFIG
