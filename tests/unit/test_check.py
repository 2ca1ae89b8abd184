"""Unit tests for the signing check service."""

import pytest

from releasesign.core.exceptions import InvalidPathError
from releasesign.models.signing import Fallback
from releasesign.services.check import SigningCheckService
from releasesign.services.check.service import FALLBACK_WARNING
from releasesign.services.resolver import resolve
from releasesign.services.variants import build_plan


def _source(store_file: str) -> dict:
    return {
        "keyAlias": "upload",
        "keyPassword": "pw1",
        "storeFile": store_file,
        "storePassword": "pw2",
    }


class TestSigningCheckService:
    """Tests for release signing checks."""

    def test_provided_keystore_present(self, config):
        """Test a provided keystore inside the app module."""
        (config.module_dir / "upload.jks").write_bytes(b"keystore")
        plan = build_plan(resolve(_source("upload.jks")), config)

        result = SigningCheckService(config.module_dir).check(plan)

        assert result.success
        assert result.warnings == []
        assert result.data.identity == "provided"
        assert result.data.signing_config == "release"
        assert result.data.store_path == config.module_dir / "upload.jks"
        assert result.data.store_readable

    def test_provided_keystore_missing(self, config):
        """Test that a missing keystore fails the check."""
        plan = build_plan(resolve(_source("upload.jks")), config)

        result = SigningCheckService(config.module_dir).check(plan)

        assert not result.success
        assert "upload.jks" in result.error
        assert result.data is not None
        assert not result.data.store_readable

    def test_directory_is_not_a_keystore(self, config):
        """Test that a directory at the keystore path is rejected."""
        (config.module_dir / "keys").mkdir()
        plan = build_plan(resolve(_source("keys")), config)

        result = SigningCheckService(config.module_dir).check(plan)
        assert not result.success

    def test_strict_missing_keystore_raises(self, config):
        """Test that strict mode raises InvalidPathError."""
        plan = build_plan(resolve(_source("missing.jks")), config)

        with pytest.raises(InvalidPathError) as exc_info:
            SigningCheckService(config.module_dir).check(plan, strict=True)
        assert exc_info.value.path.endswith("missing.jks")

    def test_fallback_warns(self, config, debug_keystore):
        """Test that the debug fallback passes with a warning."""
        plan = build_plan(Fallback(), config)

        result = SigningCheckService(config.module_dir).check(plan)

        assert result.success
        assert result.warnings == [FALLBACK_WARNING]
        assert result.data.identity == "fallback"
        assert result.data.signing_config == "debug"
        assert result.data.store_path == debug_keystore

    def test_strict_fallback_fails(self, config):
        """Test that strict mode rejects the debug fallback."""
        plan = build_plan(Fallback(), config)

        result = SigningCheckService(config.module_dir).check(plan, strict=True)

        assert not result.success
        assert result.error == FALLBACK_WARNING

    def test_fallback_with_missing_debug_keystore(self, config, debug_keystore):
        """Test that the fallback warning is kept when the keystore is also missing."""
        debug_keystore.unlink()
        plan = build_plan(Fallback(), config)

        result = SigningCheckService(config.module_dir).check(plan)

        assert not result.success
        assert result.warnings == [FALLBACK_WARNING]
