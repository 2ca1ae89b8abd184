"""Gradle Kotlin DSL rendering."""

from .service import GradleSigningRenderer

__all__ = ["GradleSigningRenderer"]
