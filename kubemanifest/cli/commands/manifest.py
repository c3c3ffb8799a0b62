"""Manifest lifecycle commands.

This module exposes the ``k8s_manifest`` lifecycle to operators: create a
resource from a manifest file, check it, re-apply it, and delete it by its
composite identifier.
"""

from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from kubemanifest.cli.console import with_error_handling
from kubemanifest.cli.context import get_cli_context
from kubemanifest.provider import (
    RESOURCE_TYPE,
    ManifestProvider,
    ResourceData,
    decode_all,
)

# ---------------------------------------------------------------------------
# Typer App
# ---------------------------------------------------------------------------

manifest_app = typer.Typer(
    name="manifest",
    help="Create, read, update, and delete Kubernetes manifests.",
    no_args_is_help=True,
)

ManifestFile = Annotated[
    typer.FileText,
    typer.Option(
        "--filename",
        "-f",
        help="Manifest file (YAML or JSON), '-' for stdin",
    ),
]

ResourceID = Annotated[
    str,
    typer.Argument(help="Composite identifier printed by 'create'"),
]


# ---------------------------------------------------------------------------
# Helper Functions
# ---------------------------------------------------------------------------


def _manifest_data(manifest: typer.FileText) -> ResourceData:
    """Read a manifest file into a resource record."""
    try:
        return ManifestProvider.resource_data(
            RESOURCE_TYPE, {"content": manifest.read()}
        )
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--filename") from e


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@manifest_app.command()
@with_error_handling
def create(ctx: typer.Context, manifest: ManifestFile) -> None:
    """Apply a manifest and print its composite identifier.

    Examples:
        kubemanifest manifest create -f app.yaml
        cat app.yaml | kubemanifest --context staging manifest create -f -
    """
    cli = get_cli_context(ctx)
    data = _manifest_data(manifest)

    with cli.console.status("Applying manifest..."):
        cli.provider.resource(RESOURCE_TYPE).create(data)

    cli.console.plain(data.id)


@manifest_app.command()
@with_error_handling
def read(ctx: typer.Context, resource_id: ResourceID) -> None:
    """Check whether every object of a resource still exists.

    Prints the identifier again when the resource is intact.
    """
    cli = get_cli_context(ctx)
    data = ResourceData(content="", id=resource_id)

    cli.provider.resource(RESOURCE_TYPE).read(data)

    if data.exists:
        cli.console.plain(data.id)
    else:
        cli.console.warn("Resource no longer exists in the cluster")


@manifest_app.command()
@with_error_handling
def update(ctx: typer.Context, manifest: ManifestFile) -> None:
    """Re-apply a manifest. The identifier does not change."""
    cli = get_cli_context(ctx)
    data = _manifest_data(manifest)

    with cli.console.status("Applying manifest..."):
        cli.provider.resource(RESOURCE_TYPE).update(data)

    cli.console.ok("Manifest applied")


@manifest_app.command()
@with_error_handling
def delete(
    ctx: typer.Context,
    resource_id: ResourceID,
    force: Annotated[
        bool,
        typer.Option("--force", "-y", help="Skip the confirmation prompt"),
    ] = False,
) -> None:
    """Delete every object of a resource, most recently created first."""
    cli = get_cli_context(ctx)
    decoded = decode_all(resource_id)

    details = "\n".join(
        f"• {escape(str(locator))}" for _, locator, _ in reversed(decoded)
    )
    if not cli.console.confirm_action(
        f"Delete {len(decoded)} object(s)", details=details, force=force
    ):
        raise typer.Exit(1)

    data = ResourceData(content="", id=resource_id)
    cli.provider.resource(RESOURCE_TYPE).delete(data)
    cli.console.ok(f"Deleted {len(decoded)} object(s)")


@manifest_app.command()
def locate(ctx: typer.Context, resource_id: ResourceID) -> None:
    """Show the objects addressed by an identifier without contacting the cluster."""
    cli = get_cli_context(ctx)

    table = Table(title="Objects (creation order)")
    table.add_column("Resource", style="cyan")
    table.add_column("Namespace")
    table.add_column("Self-link", style="dim")
    table.add_column("Valid")

    invalid = 0
    for selflink, locator, ok in decode_all(resource_id):
        invalid += not ok
        table.add_row(
            escape(locator.resource),
            escape(locator.namespace) or "-",
            escape(selflink),
            "[green]yes[/green]" if ok else "[red]no[/red]",
        )
    cli.console.print(table)

    if invalid:
        cli.console.error(f"{invalid} invalid self-link(s)")
        raise typer.Exit(1)
