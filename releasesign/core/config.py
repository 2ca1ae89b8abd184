"""
Configuration management for releasesign.

Provides centralized, type-safe configuration with environment variable overrides
and defaults matching the stock Android/Flutter project layout.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field, SecretStr, ValidationError

from ..models.build import DefaultConfig
from .exceptions import ConfigurationError

# Load .env file if it exists (looks in cwd and parent directories)
load_dotenv()

ENV_PREFIX = "RELEASESIGN_"


def _env(name: str, default: str | None = None) -> str | None:
    return os.environ.get(f"{ENV_PREFIX}{name}", default)


def _env_flag(name: str, default: bool) -> bool:
    value = _env(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class DebugKeystoreConfig(BaseModel):
    """The debug signing identity used when no release keys are supplied."""

    alias: str = Field(default="androiddebugkey", description="Debug key alias")
    key_password: SecretStr = Field(default=SecretStr("android"), description="Debug key password")
    store_file: str = Field(
        default="~/.android/debug.keystore", description="Debug keystore location"
    )
    store_password: SecretStr = Field(
        default=SecretStr("android"), description="Debug keystore password"
    )


class Config(BaseModel):
    """Root configuration for releasesign."""

    project_name: str = Field(default="releasesign", description="Project identifier")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging level"
    )
    project_root: Path = Field(
        default=Path("./android"), description="Android root project directory"
    )
    app_module: str = Field(default="app", description="Application module directory name")
    properties_filename: str = Field(
        default="key.properties", description="Signing properties file in the project root"
    )
    allow_debug_fallback: bool = Field(
        default=True, description="Sign release builds with the debug key when no properties file exists"
    )
    debug_keystore: DebugKeystoreConfig = Field(default_factory=DebugKeystoreConfig)
    default_config: DefaultConfig = Field(default_factory=DefaultConfig)

    model_config = {"extra": "ignore"}

    @property
    def properties_path(self) -> Path:
        """Location of the signing properties file."""
        return self.project_root / self.properties_filename

    @property
    def module_dir(self) -> Path:
        """Directory that relative ``storeFile`` values resolve against."""
        return self.project_root / self.app_module

    @classmethod
    def from_env(cls) -> Config:
        """Create configuration from environment variables.

        Values are handed to pydantic as strings so malformed numbers surface
        as a ConfigurationError naming the variable.

        Raises:
            ConfigurationError: If a variable does not validate.
        """
        defaults = DefaultConfig()
        android = {
            "application_id": _env("APPLICATION_ID", defaults.application_id),
            "namespace": _env("NAMESPACE", defaults.namespace),
            "compile_sdk": _env("COMPILE_SDK", str(defaults.compile_sdk)),
            "min_sdk": _env("MIN_SDK", str(defaults.min_sdk)),
            "target_sdk": _env("TARGET_SDK", str(defaults.target_sdk)),
            "version_code": _env("VERSION_CODE", str(defaults.version_code)),
            "version_name": _env("VERSION_NAME", defaults.version_name),
            "ndk_version": _env("NDK_VERSION") or None,
        }
        try:
            return cls(
                log_level=_env("LOG_LEVEL", "INFO"),  # type: ignore
                project_root=Path(_env("PROJECT_ROOT", "./android")),
                app_module=_env("APP_MODULE", "app"),
                properties_filename=_env("PROPERTIES_FILE", "key.properties"),
                allow_debug_fallback=_env_flag("ALLOW_DEBUG_FALLBACK", True),
                debug_keystore=DebugKeystoreConfig(
                    store_file=_env("DEBUG_KEYSTORE", "~/.android/debug.keystore"),
                ),
                default_config=DefaultConfig.model_validate(android),
            )
        except ValidationError as e:
            errors = e.errors()
            variable = ENV_PREFIX + str(errors[0]["loc"][-1]).upper()
            raise ConfigurationError(
                message=errors[0]["msg"],
                variable=variable,
                cause=e,
            ) from e

    def with_project_root(self, project_root: Path) -> Config:
        """Return a copy pointed at another Android project directory."""
        return self.model_copy(update={"project_root": project_root})


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Get cached configuration instance."""
    return Config.from_env()
