"""Operator checks for release signing."""

from .service import SigningCheckService, SigningReport

__all__ = ["SigningCheckService", "SigningReport"]
