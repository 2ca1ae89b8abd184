"""
Signing Configuration Resolver.

Selects the identity a release build is signed with: the credentials from the
project's ``key.properties`` when that file exists, the debug identity when it
does not.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from ...core.config import Config, get_config
from ...core.exceptions import FallbackNotAllowedError, MissingKeyError
from ...core.logging import get_logger
from ...models.signing import Fallback, Provided, SigningCredentials, SigningIdentity
from ...properties import read_properties

logger = get_logger(__name__)

# Lookup order; the first absent key is the one reported.
REQUIRED_KEYS = ("keyAlias", "keyPassword", "storeFile", "storePassword")


class SigningConfigResolver:
    """Resolves release signing from an injected property source.

    The resolver never touches the filesystem: the source is read once by the
    caller and handed in, so the same source always resolves to the same
    identity.
    """

    def __init__(
        self,
        property_source: Mapping[str, str] | None,
        *,
        source_name: str = "",
        allow_fallback: bool = True,
    ) -> None:
        """Initialize the resolver.

        Args:
            property_source: Signing properties, or None when no properties
                file exists.
            source_name: Where the properties came from, for error messages.
            allow_fallback: Whether a missing source may select the debug
                identity.
        """
        self.property_source = property_source
        self.source_name = source_name
        self.allow_fallback = allow_fallback

    def _require(self, key: str) -> str:
        try:
            return self.property_source[key]
        except KeyError as e:
            raise MissingKeyError(
                message="required for release signing",
                key=key,
                source=self.source_name,
            ) from e

    def resolve(self) -> SigningIdentity:
        """Resolve the release signing identity.

        Returns:
            Provided with the four values taken verbatim, or Fallback when
            there is no property source.

        Raises:
            MissingKeyError: If the source lacks one of REQUIRED_KEYS.
            FallbackNotAllowedError: If there is no source and fallback is disabled.
        """
        if self.property_source is None:
            if not self.allow_fallback:
                raise FallbackNotAllowedError(
                    message="provide the signing properties file or enable the fallback",
                    properties_path=self.source_name,
                )
            logger.warning(
                "signing_fallback",
                source=self.source_name or None,
                reason="no signing properties; release builds use the debug key",
            )
            return Fallback()

        alias, key_password, store_file, store_password = (
            self._require(key) for key in REQUIRED_KEYS
        )
        credentials = SigningCredentials(
            alias=alias,
            key_password=key_password,
            store_file=store_file,
            store_password=store_password,
        )
        logger.info("signing_resolved", source=self.source_name or None, alias=alias)
        return Provided(credentials=credentials)


def resolve(property_source: Mapping[str, str] | None) -> SigningIdentity:
    """Resolve the release signing identity from an optional property source."""
    return SigningConfigResolver(property_source).resolve()


def load_property_source(path: Path) -> dict[str, str] | None:
    """Load the signing properties file if it exists.

    Args:
        path: Location of ``key.properties``.

    Returns:
        The parsed properties, or None when the file does not exist.
    """
    if not path.exists():
        logger.info("properties_missing", path=str(path))
        return None
    properties = read_properties(path)
    logger.info("properties_loaded", path=str(path), key_count=len(properties))
    return properties


def resolve_from_project(config: Config | None = None) -> SigningIdentity:
    """Load ``key.properties`` from the configured project and resolve it.

    Args:
        config: Configuration to use; the cached environment config by default.

    Returns:
        The release signing identity.
    """
    config = config or get_config()
    path = config.properties_path
    resolver = SigningConfigResolver(
        load_property_source(path),
        source_name=str(path),
        allow_fallback=config.allow_debug_fallback,
    )
    return resolver.resolve()
