"""
Custom exception hierarchy for releasesign.

All exceptions inherit from ReleaseSignError so the CLI and any calling build
script can report signing failures uniformly. A missing properties file is
not an error: it selects the debug fallback identity.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ReleaseSignError(Exception):
    """Base exception for all releasesign errors."""

    message: str
    context: dict[str, Any] = field(default_factory=dict)
    cause: Exception | None = None

    def __str__(self) -> str:
        ctx = f" | context: {self.context}" if self.context else ""
        cause = f" | caused by: {self.cause}" if self.cause else ""
        return f"{self.message}{ctx}{cause}"


@dataclass
class MissingKeyError(ReleaseSignError, KeyError):
    """Raised when a signing properties source lacks a required key."""

    key: str = ""
    source: str = ""

    def __str__(self) -> str:
        where = f" in '{self.source}'" if self.source else ""
        return f"Missing signing property '{self.key}'{where}: {self.message}"


@dataclass
class PropertiesFormatError(ReleaseSignError):
    """Raised when a .properties file contains a malformed escape sequence."""

    line_number: int = 0
    source: str = ""

    def __str__(self) -> str:
        where = self.source or "<properties>"
        return f"{where}:{self.line_number}: {self.message}"


@dataclass
class InvalidPathError(ReleaseSignError):
    """Raised when a keystore path does not name a readable file."""

    path: str = ""

    def __str__(self) -> str:
        return f"Keystore '{self.path}' is not usable: {self.message}"


@dataclass
class FallbackNotAllowedError(ReleaseSignError):
    """Raised when release signing would fall back to the debug key but that is disabled."""

    properties_path: str = ""

    def __str__(self) -> str:
        return (
            f"No signing properties at '{self.properties_path}' and debug fallback "
            f"is disabled: {self.message}"
        )


@dataclass
class ConfigurationError(ReleaseSignError):
    """Raised when a RELEASESIGN_* environment variable does not validate."""

    variable: str = ""

    def __str__(self) -> str:
        return f"Invalid value for {self.variable}: {self.message}"
