"""Shared utility helpers used across the core library."""

from .param_validation import (
    ensure,
    ensure_type,
    ensure_callable,
    ParamValidationError,
)
from .config import (
    NEGATIVE_INDEX_POLICIES,
    RuntimeConfig,
    get_config,
    configure,
    reset_config,
)
from .logging import (
    get_logger,
    configure_logging,
)

__all__ = [
    "ensure",
    "ensure_type",
    "ensure_callable",
    "ParamValidationError",
    "NEGATIVE_INDEX_POLICIES",
    "RuntimeConfig",
    "get_config",
    "configure",
    "reset_config",
    "get_logger",
    "configure_logging",
]
