"""
Shared Hypothesis settings for property-based testing of bucketizers.
"""
# 说明：属性测试的 Hypothesis 运行配置。
# - "default"：本地开发使用的样本数
# - "ci"：更多样本；通过环境变量 HYPOTHESIS_PROFILE=ci 启用
# - 关闭 deadline：numpy 首次导入与日志初始化可能使单个样本耗时抖动

import os

from hypothesis import settings

settings.register_profile("default", max_examples=100, deadline=None)
settings.register_profile("ci", max_examples=500, deadline=None)
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))
