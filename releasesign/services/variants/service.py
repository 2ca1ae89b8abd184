"""
Build Variant Service.

Defines the ``release`` and ``debug`` build types and attaches the signing
credentials each one is packaged with.
"""

from __future__ import annotations

from ...core.config import Config, DebugKeystoreConfig, get_config
from ...core.logging import get_logger
from ...models.build import (
    DEFAULT_PROGUARD_FILE,
    PROGUARD_RULES_FILE,
    BuildPlan,
    BuildVariant,
)
from ...models.signing import Provided, SigningCredentials, SigningIdentity

logger = get_logger(__name__)

RELEASE_PROGUARD_FILES = (DEFAULT_PROGUARD_FILE, PROGUARD_RULES_FILE)


def debug_credentials(keystore: DebugKeystoreConfig) -> SigningCredentials:
    """Build the debug signing identity from configuration."""
    return SigningCredentials(
        alias=keystore.alias,
        key_password=keystore.key_password,
        store_file=keystore.store_file,
        store_password=keystore.store_password,
    )


def build_variants(
    identity: SigningIdentity, debug: SigningCredentials
) -> list[BuildVariant]:
    """Define the release and debug variants.

    Release is minified and resource-shrunk and is signed with the provided
    credentials, or with ``debug`` when the identity is a fallback. Debug has
    no code or resource shrinking.

    Args:
        identity: Resolved release signing identity.
        debug: The debug signing credentials.

    Returns:
        list[BuildVariant]: ``[release, debug]``.
    """
    if isinstance(identity, Provided):
        release_signing, release_credentials = "release", identity.credentials
    else:
        release_signing, release_credentials = "debug", debug

    release = BuildVariant(
        name="release",
        minify_enabled=True,
        shrink_resources=True,
        proguard_files=list(RELEASE_PROGUARD_FILES),
        signing_config=release_signing,
        credentials=release_credentials,
    )
    debug_variant = BuildVariant(
        name="debug",
        minify_enabled=False,
        shrink_resources=False,
        signing_config="debug",
        credentials=debug,
    )
    return [release, debug_variant]


def build_plan(identity: SigningIdentity, config: Config | None = None) -> BuildPlan:
    """Combine the signing identity, pass-through defaults and variants."""
    config = config or get_config()
    variants = build_variants(identity, debug_credentials(config.debug_keystore))
    logger.debug(
        "build_plan_created",
        identity=identity.kind,
        variants=[v.name for v in variants],
    )
    return BuildPlan(
        identity=identity,
        default_config=config.default_config,
        variants=variants,
    )
