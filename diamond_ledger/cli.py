"""Command-line interface for the diamond ledger."""

import json
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .chaincode import OPERATIONS, DiamondChaincode
from .state import create_state_store
from .utils.config import get_settings
from .utils.logging import get_logger, setup_logging
from .utils.types import InvocationResponse

logger = get_logger(__name__)
console = Console()


@click.group()
@click.version_option(version=__version__, prog_name="diamond-ledger")
@click.option(
    "--store-dir",
    "-s",
    default=None,
    help="Directory of the file state store (overrides STATE_DIRECTORY)",
    type=click.Path(file_okay=False, path_type=Path),
)
def cli(store_dir: Path | None) -> None:
    """Diamond ledger - ownership records for named diamonds."""
    settings = get_settings()
    if store_dir is not None:
        settings.state.backend = "file"
        settings.state.directory = store_dir


def _chaincode() -> DiamondChaincode:
    return DiamondChaincode(create_state_store(get_settings().state))


def _report(response: InvocationResponse, success_message: str | None = None) -> None:
    """Print an invocation outcome, exiting non-zero on failure."""
    if not response.success:
        kind = response.error_kind.value if response.error_kind else "Error"
        console.print(f"[bold red]✗[/bold red] {kind}: {escape(response.message)}")
        raise click.exceptions.Exit(1)

    if response.payload is not None:
        click.echo(response.payload.decode("utf-8"))
    elif success_message:
        console.print(f"[bold green]✓[/bold green] {escape(success_message)}")


@cli.command()
@click.argument("function", required=True)
@click.argument("args", nargs=-1)
def invoke(function: str, args: tuple[str, ...]) -> None:
    """Invoke a contract function by name with string arguments."""
    response = _chaincode().invoke(function, list(args))
    _report(response, f"{function} succeeded")


@cli.command()
@click.argument("name")
@click.argument("origin")
@click.argument("weight")
@click.argument("owner")
def create(name: str, origin: str, weight: str, owner: str) -> None:
    """Create a new diamond."""
    response = _chaincode().invoke("createAsset", [name, origin, weight, owner])
    _report(response, f"Diamond created: {name}")


@cli.command()
@click.argument("name")
@click.option(
    "--format",
    "-f",
    "_format",
    default="json",
    help="Output format (json, table)",
    type=click.Choice(["json", "table"]),
)
def query(name: str, _format: str) -> None:
    """Show a diamond as stored."""
    response = _chaincode().invoke("queryAsset", [name])
    if not response.success or _format == "json" or response.payload is None:
        _report(response)
        return

    record = json.loads(response.payload)
    table = Table(title=f"Diamond {record.get('name', name)}")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="magenta")
    for field_name, value in record.items():
        table.add_row(field_name, str(value))
    console.print(table)


@cli.command()
@click.argument("name")
@click.argument("new_owner")
def transfer(name: str, new_owner: str) -> None:
    """Transfer a diamond to a new owner."""
    response = _chaincode().invoke("transferAsset", [name, new_owner])
    _report(response, f"Diamond {name} transferred to {new_owner.lower()}")


@cli.command()
def status() -> None:
    """Check diamond ledger configuration."""
    settings = get_settings()
    console.print("[bold blue]Diamond Ledger Status[/bold blue]")
    console.print()

    console.print(f"State backend: [cyan]{settings.state.backend}[/cyan]")
    console.print(f"State directory: [cyan]{settings.state.directory}[/cyan]")
    console.print(f"Log level: [cyan]{settings.app.log_level}[/cyan]")
    console.print(f"Operations: [cyan]{', '.join(OPERATIONS)}[/cyan]")


def main() -> None:
    """Entry point for the CLI application."""
    setup_logging()
    try:
        cli()
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
    except Exception as e:
        console.print(f"\n[red]Unexpected error: {escape(str(e))}[/red]")
        logger.error("CLI error", error=str(e))
        raise SystemExit(1) from e


if __name__ == "__main__":
    main()
