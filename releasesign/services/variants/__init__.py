"""Build variant definitions."""

from .service import RELEASE_PROGUARD_FILES, build_plan, build_variants, debug_credentials

__all__ = ["RELEASE_PROGUARD_FILES", "build_plan", "build_variants", "debug_credentials"]
