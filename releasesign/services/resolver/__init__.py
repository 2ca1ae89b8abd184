"""Signing configuration resolver."""

from .service import (
    REQUIRED_KEYS,
    SigningConfigResolver,
    load_property_source,
    resolve,
    resolve_from_project,
)

__all__ = [
    "REQUIRED_KEYS",
    "SigningConfigResolver",
    "load_property_source",
    "resolve",
    "resolve_from_project",
]
