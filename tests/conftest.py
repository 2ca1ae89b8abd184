"""Test configuration for releasesign."""

from functools import partial
from pathlib import Path
import tempfile
import textwrap

import pytest
import structlog

from releasesign.core.config import Config, DebugKeystoreConfig, get_config
from releasesign.core.logging import clear_context, setup_logging


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests.

    Yields:
        Path: A Path object pointing to the temporary directory.
            The directory is automatically cleaned up after the test.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def project_root(temp_dir):
    """Create an Android root project layout with an empty app module.

    Returns:
        Path: The ``android`` directory.
    """
    root = temp_dir / "android"
    (root / "app").mkdir(parents=True)
    return root


@pytest.fixture
def write_key_properties(project_root):
    """Factory writing ``key.properties`` into the project root.

    Returns:
        Callable[[str], Path]: Takes the file content, returns its path.
    """
    def _write(content: str) -> Path:
        path = project_root / "key.properties"
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def debug_keystore(temp_dir):
    """Create a stand-in debug keystore file.

    Returns:
        Path: Location of the file.
    """
    path = temp_dir / "debug.keystore"
    path.write_bytes(b"debug-keystore")
    return path


@pytest.fixture
def config(project_root, debug_keystore):
    """Configuration pointed at the temporary project.

    Returns:
        Config: Configuration using the temporary debug keystore.
    """
    return Config(
        project_root=project_root,
        debug_keystore=DebugKeystoreConfig(store_file=str(debug_keystore)),
    )


@pytest.fixture(autouse=True)
def clear_config_cache():
    """Drop the cached environment configuration around each test."""
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture(autouse=True)
def reset_logging(monkeypatch):
    """Keep module loggers uncached and drop bound context between tests."""
    monkeypatch.setattr("releasesign.cli.setup_logging", partial(setup_logging, cache_loggers=False))
    structlog.reset_defaults()
    clear_context()
    yield
    structlog.reset_defaults()
    clear_context()
