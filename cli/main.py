"""osdetect CLI - report the host operating system."""
import logging
import sys

import typer
from rich.console import Console
from rich.table import Table
from rich.logging import RichHandler

from osdetect_core import OsDetector
from osdetect_core.config import get_config
from osdetect_core.exceptions import OSDetectError

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    handlers=[RichHandler(rich_tracebacks=True, show_path=False)]
)
logger = logging.getLogger("osdetect")

# Rich console for pretty output
console = Console()

# CLI app
app = typer.Typer(
    name="osdetect",
    help="osdetect - Host operating system detection",
    no_args_is_help=True,
)

config_app = typer.Typer(help="Configuration commands")
app.add_typer(config_app, name="config")


def handle_error(e: Exception) -> None:
    """Handle and display errors nicely."""
    if isinstance(e, OSDetectError):
        console.print(f"[red]Error:[/red] {e}")
    else:
        console.print(f"[red]Unexpected error:[/red] {e}")
        logger.exception("Unexpected error")
    raise typer.Exit(1)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Enable debug logging"),
):
    """osdetect - Host operating system detection."""
    level = "DEBUG" if verbose else get_config().log_level.upper()
    logging.getLogger().setLevel(getattr(logging, level, logging.INFO))


# ============================================================================
# Root Commands
# ============================================================================

@app.command("info")
def info_cmd(
    as_json: bool = typer.Option(False, "--json", help="Print as JSON"),
):
    """Show operating system information."""
    try:
        info = OsDetector().get_os_info()
    except Exception as e:
        handle_error(e)
        return

    if as_json:
        console.print_json(info.model_dump_json())
        return

    table = Table(title="Operating System")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Name", info.name or "[dim]-[/dim]")
    table.add_row("Version", info.version or "[dim]-[/dim]")
    table.add_row("Architecture", info.architecture)
    table.add_row("Details", info.additional_info or "[dim]-[/dim]")
    console.print(table)


@app.command("version")
def version_cmd():
    """Show osdetect version."""
    from osdetect_core import __version__
    console.print(f"osdetect v{__version__}")


# ============================================================================
# Config Commands
# ============================================================================

@config_app.command("show")
def show_config_cmd():
    """Show current configuration."""
    config = get_config()
    console.print("\n[bold]osdetect Configuration:[/bold]")
    for key, value in config.model_dump().items():
        console.print(f"  {key}: {value}")


@config_app.command("path")
def config_path_cmd():
    """Show configuration file path."""
    from osdetect_core.config import get_config_manager

    manager = get_config_manager()
    console.print(f"Config file: {manager.config_path}")


def main():
    """Main entry point."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[dim]Interrupted[/dim]")
        sys.exit(0)


if __name__ == "__main__":
    main()
