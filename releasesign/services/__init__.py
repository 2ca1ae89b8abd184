"""Services package for releasesign."""

from .check import SigningCheckService
from .gradle import GradleSigningRenderer
from .resolver import SigningConfigResolver, resolve, resolve_from_project
from .variants import build_plan, build_variants

__all__ = [
    "SigningCheckService",
    "GradleSigningRenderer",
    "SigningConfigResolver",
    "resolve",
    "resolve_from_project",
    "build_plan",
    "build_variants",
]
