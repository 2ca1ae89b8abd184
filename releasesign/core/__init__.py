"""Core infrastructure components for releasesign."""

from .config import Config, DebugKeystoreConfig, get_config
from .exceptions import (
    ConfigurationError,
    FallbackNotAllowedError,
    InvalidPathError,
    MissingKeyError,
    PropertiesFormatError,
    ReleaseSignError,
)
from .logging import bind_context, clear_context, get_logger, setup_logging
from .types import ServiceResult

__all__ = [
    "Config",
    "DebugKeystoreConfig",
    "get_config",
    "ConfigurationError",
    "FallbackNotAllowedError",
    "InvalidPathError",
    "MissingKeyError",
    "PropertiesFormatError",
    "ReleaseSignError",
    "bind_context",
    "clear_context",
    "get_logger",
    "setup_logging",
    "ServiceResult",
]
