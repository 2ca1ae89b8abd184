"""
Signing Check Service.

Reports what a release build will be signed with and whether the keystore is
usable, before the packaging toolchain finds out the hard way.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

from ...core.exceptions import InvalidPathError
from ...core.logging import get_logger
from ...core.types import ServiceResult
from ...models.build import BuildPlan

logger = get_logger(__name__)

FALLBACK_WARNING = (
    "Release builds are signed with the debug key; provide signing properties "
    "before publishing."
)


class SigningReport(BaseModel):
    """Outcome of checking a build plan's release signing."""

    identity: str = Field(description="provided or fallback")
    signing_config: str = Field(description="Signing config used by the release variant")
    alias: str
    store_file: str = Field(description="Keystore location as written in the source")
    store_path: Path = Field(description="Keystore location resolved against the module")
    store_readable: bool = Field(default=False)


class SigningCheckService:
    """Service for checking the release signing of a build plan."""

    def __init__(self, module_dir: Path) -> None:
        """Initialize the check service.

        Args:
            module_dir: App module directory that relative keystore paths
                resolve against.
        """
        self.module_dir = module_dir

    @staticmethod
    def _readable(path: Path) -> bool:
        return path.is_file() and os.access(path, os.R_OK)

    def check(self, plan: BuildPlan, *, strict: bool = False) -> ServiceResult[SigningReport]:
        """Check the release variant's signing.

        Args:
            plan: Resolved build plan.
            strict: Treat the debug fallback as a failure and raise on an
                unusable keystore.

        Returns:
            ServiceResult[SigningReport]: Failed when the keystore is not a
            readable file, or in strict mode when the fallback is in use.

        Raises:
            InvalidPathError: In strict mode, when the keystore is unusable.
        """
        release = plan.variant("release")
        if release is None:
            return ServiceResult.fail("Build plan has no release variant")

        credentials = release.credentials
        store_path = credentials.store_path(self.module_dir)
        report = SigningReport(
            identity=plan.identity.kind,
            signing_config=release.signing_config,
            alias=credentials.alias,
            store_file=credentials.store_file,
            store_path=store_path,
            store_readable=self._readable(store_path),
        )
        logger.info(
            "signing_check_completed",
            identity=report.identity,
            store_path=str(store_path),
            store_readable=report.store_readable,
        )

        warnings = [FALLBACK_WARNING] if plan.uses_fallback else []

        if not report.store_readable:
            if strict:
                raise InvalidPathError(
                    message="not a readable file",
                    path=str(store_path),
                )
            result = ServiceResult.fail(
                f"Keystore '{store_path}' is not a readable file", data=report
            )
            result.warnings.extend(warnings)
            return result

        if warnings:
            if strict:
                return ServiceResult.fail(FALLBACK_WARNING, data=report)
            return ServiceResult.with_warnings(report, warnings)

        return ServiceResult.ok(report)
