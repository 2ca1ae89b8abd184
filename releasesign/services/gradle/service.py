"""
Gradle Renderer.

Renders a resolved BuildPlan as the Kotlin DSL fragment of an app module's
``build.gradle.kts``. Passwords are never written: the release signing config
reads them from ``keystoreProperties`` at configuration time.
"""

from __future__ import annotations

from ...core.logging import get_logger
from ...models.build import DEFAULT_PROGUARD_FILE, BuildPlan, BuildVariant
from ...models.signing import Provided
from ..resolver import REQUIRED_KEYS

logger = get_logger(__name__)


def _kotlin_string(value: str) -> str:
    """Quote a value as a Kotlin string literal without template expansion."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("$", "\\$")
    return f'"{escaped}"'


def _indent(block: str, level: int) -> str:
    pad = "    " * level
    return "\n".join(f"{pad}{line}" if line else "" for line in block.splitlines())


class GradleSigningRenderer:
    """Renders signing and build type configuration as Gradle Kotlin DSL."""

    def __init__(self, properties_filename: str = "key.properties") -> None:
        """Initialize the renderer.

        Args:
            properties_filename: Name of the properties file, relative to the
                root project.
        """
        self.properties_filename = properties_filename

    def render_properties_loader(self) -> str:
        """Generate the top-level ``keystoreProperties`` loading code."""
        return f'''val keystoreProperties = Properties()
val keystorePropertiesFile = rootProject.file({_kotlin_string(self.properties_filename)})
if (keystorePropertiesFile.exists()) {{
    keystoreProperties.load(FileInputStream(keystorePropertiesFile))
}}'''

    def render_signing_configs(self, plan: BuildPlan) -> str:
        """Generate the ``signingConfigs`` block.

        The release config is only populated when credentials were provided;
        otherwise release builds reference the built-in debug config.
        """
        if not isinstance(plan.identity, Provided):
            return "signingConfigs {\n}"

        lines = []
        for key in REQUIRED_KEYS:
            lookup = f'keystoreProperties[{_kotlin_string(key)}] as String'
            if key == "storeFile":
                lookup = f"file({lookup})"
            lines.append(f"{key} = {lookup}")
        body = _indent("\n".join(lines), 2)
        return f'''signingConfigs {{
    create("release") {{
{body}
    }}
}}'''

    def render_build_type(self, variant: BuildVariant) -> str:
        """Generate a single build type block."""
        lines = [f'signingConfig = signingConfigs.getByName({_kotlin_string(variant.signing_config)})']
        lines.append(f"isMinifyEnabled = {str(variant.minify_enabled).lower()}")
        lines.append(f"isShrinkResources = {str(variant.shrink_resources).lower()}")
        if variant.proguard_files:
            files = []
            for name in variant.proguard_files:
                if name == DEFAULT_PROGUARD_FILE:
                    files.append(f'getDefaultProguardFile({_kotlin_string(name)})')
                else:
                    files.append(_kotlin_string(name))
            joined = ",\n".join(f"    {f}" for f in files)
            lines.append(f"proguardFiles(\n{joined}\n)")
        body = _indent("\n".join(lines), 1)
        return f"{variant.name} {{\n{body}\n}}"

    def render_build_types(self, plan: BuildPlan) -> str:
        """Generate the ``buildTypes`` block."""
        blocks = "\n\n".join(self.render_build_type(v) for v in plan.variants)
        return f"buildTypes {{\n{_indent(blocks, 1)}\n}}"

    def render(self, plan: BuildPlan) -> str:
        """Generate the complete module build script fragment.

        Args:
            plan: Resolved build plan.

        Returns:
            str: Kotlin DSL source.
        """
        config = plan.default_config
        ndk_line = f"\n    ndkVersion = {_kotlin_string(config.ndk_version)}" if config.ndk_version else ""
        java = f"JavaVersion.VERSION_{config.java_version}"

        script = f'''import java.util.Properties
import java.io.FileInputStream

{self.render_properties_loader()}

android {{
    namespace = {_kotlin_string(config.namespace)}
    compileSdk = {config.compile_sdk}{ndk_line}

    compileOptions {{
        sourceCompatibility = {java}
        targetCompatibility = {java}
    }}

    kotlinOptions {{
        jvmTarget = {java}.toString()
    }}

{_indent(self.render_signing_configs(plan), 1)}

    defaultConfig {{
        applicationId = {_kotlin_string(config.application_id)}
        minSdk = {config.min_sdk}
        targetSdk = {config.target_sdk}
        versionCode = {config.version_code}
        versionName = {_kotlin_string(config.version_name)}
    }}

{_indent(self.render_build_types(plan), 1)}
}}
'''
        logger.debug("gradle_rendered", identity=plan.identity.kind, length=len(script))
        return script
