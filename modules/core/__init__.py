from .config import (
    ConfigurationError,
    RateLimitConfig,
    RuntimeConfig,
    load_runtime_config,
    validate_runtime_config,
)
from .logging import configure_logging

__all__ = [
    "ConfigurationError",
    "RateLimitConfig",
    "RuntimeConfig",
    "load_runtime_config",
    "validate_runtime_config",
    "configure_logging",
]
