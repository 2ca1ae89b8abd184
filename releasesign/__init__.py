"""
releasesign: Release signing configuration for Android builds.

Resolves the keystore credentials used to sign release packages from an
optional ``key.properties`` file, falling back to the debug identity when
the file is absent, and derives the release/debug build variants.
"""

__version__ = "1.0.0"
__author__ = "releasesign Team"
