"""Main CLI application module.

This module provides the main entry point for the kubemanifest CLI. Global
options select the cluster credentials; the ``manifest`` group drives the
resource lifecycle.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from kubemanifest.provider import ManifestProvider

from .commands import manifest_app
from .console import console
from .context import build_cli_context, build_provider_config, configure_logging

# Create the main CLI application
app = typer.Typer(
    help="Manage Kubernetes manifests through kubectl",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            envvar="KUBEMANIFEST_CONFIG",
            exists=True,
            dir_okay=False,
            help="YAML file with a top-level 'config:' section",
        ),
    ] = None,
    kubeconfig: Annotated[
        str | None,
        typer.Option("--kubeconfig", help="Path to a kubeconfig file"),
    ] = None,
    kubeconfig_content: Annotated[
        str | None,
        typer.Option(
            "--kubeconfig-content",
            envvar="KUBECONFIG_CONTENT",
            show_envvar=True,
            help="Inline kubeconfig document",
        ),
    ] = None,
    context: Annotated[
        str | None,
        typer.Option("--context", help="kubeconfig context to use"),
    ] = None,
    kubectl: Annotated[
        str | None,
        typer.Option("--kubectl", help="kubectl executable"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log every kubectl invocation"),
    ] = False,
) -> None:
    """Resolve provider configuration shared by all commands."""
    try:
        provider_config = build_provider_config(
            config,
            kubeconfig=kubeconfig,
            kubeconfig_content=kubeconfig_content,
            kubeconfig_context=context,
            kubectl_binary=kubectl,
        )
    except ValueError as e:
        console.handle_error("Invalid configuration", str(e))

    configure_logging("DEBUG" if verbose else provider_config.log_level)
    ctx.obj = build_cli_context(provider_config)


@app.command()
def schema() -> None:
    """Print the provider and resource schema as JSON."""
    console.plain(json.dumps(ManifestProvider.schema(), indent=2))


app.add_typer(manifest_app, name="manifest")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
