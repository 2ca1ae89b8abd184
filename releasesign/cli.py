"""
releasesign CLI.

Command-line interface for inspecting and checking release signing.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from .core.config import Config, get_config
from .core.exceptions import ReleaseSignError
from .core.logging import bind_context, clear_context, setup_logging
from .models.build import BuildPlan

app = typer.Typer(
    name="releasesign",
    help="Release signing configuration for Android builds",
    add_completion=False,
)

console = Console()

PROJECT_ROOT_ARGUMENT = typer.Argument(
    None,
    help="Android root project directory (contains key.properties)",
    file_okay=False,
    dir_okay=True,
    resolve_path=True,
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        from . import __version__
        console.print(f"releasesign v{__version__}")
        raise typer.Exit()


@app.callback()
def callback(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """releasesign: resolve the keystore used for release builds."""


def _load_config() -> Config:
    try:
        return get_config()
    except ReleaseSignError as e:
        console.print(f"[bold red]✗ {e}[/bold red]")
        raise typer.Exit(1)


def _config(project_root: Path | None, verbose: bool = False) -> Config:
    config = _load_config()
    if project_root is not None:
        config = config.with_project_root(project_root)
    if verbose:
        config = config.model_copy(update={"log_level": "DEBUG"})
    setup_logging(config)
    clear_context()
    bind_context(project_root=str(config.project_root))
    return config


def _plan(config: Config) -> BuildPlan:
    from .services.resolver import resolve_from_project
    from .services.variants import build_plan

    try:
        identity = resolve_from_project(config)
    except ReleaseSignError as e:
        console.print(f"[bold red]✗ {e}[/bold red]")
        raise typer.Exit(1)
    return build_plan(identity, config)


@app.command()
def resolve(
    project_root: Optional[Path] = PROJECT_ROOT_ARGUMENT,
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logging"),
) -> None:
    """Resolve the release signing identity (passwords are masked)."""
    config = _config(project_root, verbose)
    plan = _plan(config)
    credentials = plan.effective_credentials("release")

    table = Table(title="Release Signing")
    table.add_column("Property", style="cyan")
    table.add_column("Value")

    table.add_row("Properties File", str(config.properties_path))
    if plan.uses_fallback:
        table.add_row("Identity", "[yellow]fallback (debug key)[/yellow]")
    else:
        table.add_row("Identity", "[green]provided[/green]")
    for name, value in credentials.masked().items():
        table.add_row(name, value)

    console.print(table)


@app.command()
def variants(
    project_root: Optional[Path] = PROJECT_ROOT_ARGUMENT,
) -> None:
    """List the build variants and how each is signed."""
    config = _config(project_root)
    plan = _plan(config)

    table = Table(title="Build Variants")
    table.add_column("Variant", style="cyan")
    table.add_column("Minify")
    table.add_column("Shrink Resources")
    table.add_column("Signing Config")
    table.add_column("Key Alias")

    for variant in plan.variants:
        table.add_row(
            variant.name,
            str(variant.minify_enabled),
            str(variant.shrink_resources),
            variant.signing_config,
            variant.credentials.alias,
        )

    console.print(table)


@app.command()
def gradle(
    project_root: Optional[Path] = PROJECT_ROOT_ARGUMENT,
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the script fragment to a file instead of stdout",
    ),
) -> None:
    """Render the signingConfigs and buildTypes blocks as Kotlin DSL."""
    from .services.gradle import GradleSigningRenderer

    config = _config(project_root)
    plan = _plan(config)
    script = GradleSigningRenderer(config.properties_filename).render(plan)

    if output is None:
        typer.echo(script, nl=False)
        return
    output.write_text(script, encoding="utf-8")
    console.print(f"[bold green]✓[/bold green] Wrote {output}")


@app.command()
def check(
    project_root: Optional[Path] = PROJECT_ROOT_ARGUMENT,
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Fail when release builds would use the debug key",
    ),
) -> None:
    """Check that release builds have a usable keystore."""
    from .services.check import SigningCheckService

    config = _config(project_root)
    plan = _plan(config)

    try:
        result = SigningCheckService(config.module_dir).check(plan, strict=strict)
    except ReleaseSignError as e:
        console.print(f"[bold red]✗ {e}[/bold red]")
        raise typer.Exit(1)

    for warning in result.warnings:
        console.print(f"[yellow]Warning: {warning}[/yellow]")

    if result.data is not None:
        console.print(f"[bold]Keystore:[/bold] {result.data.store_path}")
        console.print(f"[bold]Alias:[/bold] {result.data.alias}")

    if not result.success:
        console.print(f"[bold red]✗ {result.error}[/bold red]")
        raise typer.Exit(1)
    console.print("[bold green]✓ Release signing is usable[/bold green]")


@app.command()
def config() -> None:
    """Show the current configuration."""
    cfg = _load_config()

    table = Table(title="Current Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("Log Level", cfg.log_level)
    table.add_row("Project Root", str(cfg.project_root))
    table.add_row("App Module", cfg.app_module)
    table.add_row("Properties File", cfg.properties_filename)
    table.add_row("Debug Fallback", str(cfg.allow_debug_fallback))
    table.add_row("Debug Keystore", cfg.debug_keystore.store_file)
    table.add_row("Application ID", cfg.default_config.application_id)
    table.add_row("Min SDK", str(cfg.default_config.min_sdk))
    table.add_row("Target SDK", str(cfg.default_config.target_sdk))
    table.add_row("NDK Version", cfg.default_config.ndk_version or "-")

    console.print(table)

    console.print("\n[dim]Configure via environment variables:[/dim]")
    console.print("  RELEASESIGN_PROJECT_ROOT, RELEASESIGN_PROPERTIES_FILE")
    console.print("  RELEASESIGN_ALLOW_DEBUG_FALLBACK, RELEASESIGN_LOG_LEVEL")
    console.print("  RELEASESIGN_MIN_SDK, RELEASESIGN_TARGET_SDK, RELEASESIGN_NDK_VERSION")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
