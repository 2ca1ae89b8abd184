"""
Signing data models.

A release build is signed either with credentials supplied through a
properties file or with the debug identity. The two cases are modelled as a
tagged union so callers have to handle the fallback explicitly.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, SecretStr


class SigningCredentials(BaseModel):
    """Keystore material needed to sign an application package."""

    alias: str = Field(description="Key alias inside the keystore")
    key_password: SecretStr = Field(description="Password of the key")
    store_file: str = Field(description="Keystore location, verbatim from the source")
    store_password: SecretStr = Field(description="Password of the keystore")

    model_config = {"frozen": True}

    def store_path(self, base_dir: Path) -> Path:
        """Resolve the keystore location against a module directory.

        Absolute paths are kept, ``~`` is expanded, anything else is relative
        to ``base_dir``.

        Args:
            base_dir: Directory of the module whose build script names the keystore.

        Returns:
            Path: The keystore path. Existence is not checked.
        """
        path = Path(self.store_file).expanduser()
        if path.is_absolute():
            return path
        return base_dir / path

    def masked(self) -> dict[str, str]:
        """Get a display-safe view with passwords hidden.

        Returns:
            dict[str, str]: Field name to value, passwords replaced by asterisks.
        """
        return {
            "keyAlias": self.alias,
            "keyPassword": str(self.key_password),
            "storeFile": self.store_file,
            "storePassword": str(self.store_password),
        }


class Provided(BaseModel):
    """Release signing with externally supplied credentials."""

    kind: Literal["provided"] = "provided"
    credentials: SigningCredentials

    model_config = {"frozen": True}


class Fallback(BaseModel):
    """Release signing with the debug identity."""

    kind: Literal["fallback"] = "fallback"

    model_config = {"frozen": True}


SigningIdentity = Annotated[Union[Provided, Fallback], Field(discriminator="kind")]
