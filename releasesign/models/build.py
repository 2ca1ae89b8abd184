"""
Build configuration data models.

These models describe what the Android Gradle plugin receives: the
pass-through ``defaultConfig`` values and one entry per build variant.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from .signing import Fallback, SigningCredentials, SigningIdentity

DEFAULT_PROGUARD_FILE = "proguard-android-optimize.txt"
PROGUARD_RULES_FILE = "proguard-rules.pro"


class DefaultConfig(BaseModel):
    """Values handed through from the Flutter toolchain, never computed here."""

    namespace: str = Field(default="com.devisb.stock_management")
    application_id: str = Field(default="com.devisb.stock_management")
    compile_sdk: int = Field(default=35)
    min_sdk: int = Field(default=21)
    target_sdk: int = Field(default=35)
    version_code: int = Field(default=1)
    version_name: str = Field(default="1.0.0")
    ndk_version: str | None = Field(default=None)

    # Kotlin options
    java_version: str = Field(default="11", description="sourceCompatibility and jvmTarget")


class BuildVariant(BaseModel):
    """Android build type configuration."""

    name: str = Field(description="Build type name (debug/release)")
    minify_enabled: bool = Field(default=False)
    shrink_resources: bool = Field(default=False)
    proguard_files: list[str] = Field(default_factory=list)
    signing_config: Literal["release", "debug"] = Field(
        description="Name of the signing config the variant uses"
    )
    credentials: SigningCredentials = Field(description="Effective signing credentials")

    model_config = {"frozen": True}


class BuildPlan(BaseModel):
    """The resolved signing identity together with every build variant."""

    identity: SigningIdentity
    default_config: DefaultConfig = Field(default_factory=DefaultConfig)
    variants: list[BuildVariant] = Field(default_factory=list)

    @property
    def uses_fallback(self) -> bool:
        """Whether release builds are signed with the debug identity."""
        return isinstance(self.identity, Fallback)

    def variant(self, name: str) -> BuildVariant | None:
        """Get a variant by name."""
        for variant in self.variants:
            if variant.name == name:
                return variant
        return None

    def effective_credentials(self, name: str) -> SigningCredentials:
        """Get the credentials a variant is signed with.

        Raises:
            KeyError: If no variant has this name.
        """
        variant = self.variant(name)
        if variant is None:
            raise KeyError(name)
        return variant.credentials
