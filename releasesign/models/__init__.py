"""
releasesign data models.

Pydantic models for signing credentials, the provided/fallback signing
identity, and the build variants derived from it.
"""

from .build import BuildPlan, BuildVariant, DefaultConfig
from .signing import Fallback, Provided, SigningCredentials, SigningIdentity

__all__ = [
    "BuildPlan",
    "BuildVariant",
    "DefaultConfig",
    "Fallback",
    "Provided",
    "SigningCredentials",
    "SigningIdentity",
]
