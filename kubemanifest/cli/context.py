"""CLI context and dependency container."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import click
import typer
from loguru import logger

from kubemanifest.cli.console import CLIConsole, console
from kubemanifest.config import ProviderConfig, load_config
from kubemanifest.provider import ManifestProvider

LOG_FORMAT = "<dim>{time:HH:mm:ss}</dim> <level>{level: <8}</level> {message}"


@dataclass(frozen=True)
class CLIContext:
    """Runtime dependencies for CLI commands."""

    console: CLIConsole
    config: ProviderConfig
    provider: ManifestProvider


def build_provider_config(
    config_path: Path | None = None, **overrides: Any
) -> ProviderConfig:
    """Merge the optional config file with command-line overrides.

    Overrides set to None are ignored.

    Raises:
        ValueError: If the file or the merged settings are invalid
    """
    base = load_config(config_path) if config_path else ProviderConfig()
    values = base.model_dump()
    values["kubeconfig_content"] = base.inline_kubeconfig
    values.update({k: v for k, v in overrides.items() if v is not None})
    return ManifestProvider().configure(values)


def configure_logging(level: str) -> None:
    """Route loguru output to stderr at the given level."""
    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)


def build_cli_context(config: ProviderConfig | None = None) -> CLIContext:
    """Build a fresh CLIContext."""
    config = config or ProviderConfig()
    return CLIContext(
        console=console,
        config=config,
        provider=ManifestProvider(config=config),
    )


def get_cli_context(ctx: typer.Context | None = None) -> CLIContext:
    """Return the CLIContext from Typer, falling back to a new instance."""
    context = ctx or click.get_current_context(silent=True)
    if context and isinstance(context.obj, CLIContext):
        return context.obj
    return build_cli_context()
