"""CLI entry point for the Admiral Business Group Resolver.

Usage:
    business-groups list
    business-groups list --output json
    business-groups resolve 7a1b
    business-groups name "Development"
"""

import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .core.config import APIConfig
from .core.exceptions import BusinessGroupError
from .output.formatters import JSONFormatter, ListingFormatter, TableFormatter
from .providers.directory import BusinessGroupDirectory
from .resolution.group_resolver import BusinessGroupResolver

# Initialize app
app = typer.Typer(
    name="business-groups",
    help="List Admiral business groups and resolve short IDs or labels",
    add_completion=False,
)

console = Console()

# Log records go to stderr so stdout carries only command output
log_console = Console(stderr=True)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=log_console, show_time=False, show_path=False)],
    )
    # Request lines from httpx only with --verbose
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)


def _build_directory(url: Optional[str], config_file: Optional[Path]) -> BusinessGroupDirectory:
    config = APIConfig.load(config_file=config_file)
    if url:
        config.url = url
    return BusinessGroupDirectory(config=config)


def _fail(error: Exception, verbose: bool) -> NoReturn:
    console.print(f"[red]Error: {escape(str(error))}[/]")
    if verbose:
        import traceback
        traceback.print_exc()
    raise typer.Exit(1)


URL_OPTION = typer.Option(None, "--url", "-u", help="Admiral base URL (overrides config)")
CONFIG_OPTION = typer.Option(None, "--config", help="Path to YAML config file")
VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Enable verbose logging")


@app.command("list")
def list_groups(
    output: str = typer.Option(
        "text",
        "--output", "-o",
        help="Output format: text, table, json",
    ),
    url: Optional[str] = URL_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """List all business groups."""
    setup_logging(verbose)

    try:
        groups = _build_directory(url, config).fetch()
    except BusinessGroupError as e:
        _fail(e, verbose)

    output_lower = output.lower()
    if output_lower == "json":
        print(JSONFormatter().format(groups))
    elif output_lower == "table":
        console.print(TableFormatter().build(groups))
    elif output_lower == "text":
        print(ListingFormatter().format(groups))
    else:
        console.print(f"[red]Invalid output format: {escape(output)}[/]")
        console.print("Valid formats: text, table, json")
        raise typer.Exit(1)


@app.command()
def resolve(
    token: str = typer.Argument(..., help="Short ID (or prefix of one) or label"),
    url: Optional[str] = URL_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """
    Print the full ID of the business group matching TOKEN.

    Examples:
        business-groups resolve 7a1b
        business-groups resolve Development
    """
    setup_logging(verbose)

    try:
        resolver = BusinessGroupResolver(_build_directory(url, config))
        full_id = resolver.resolve_id(token)
    except BusinessGroupError as e:
        _fail(e, verbose)

    print(full_id)


@app.command()
def name(
    token: str = typer.Argument(..., help="Short ID (or prefix of one) or label"),
    url: Optional[str] = URL_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Print the label of the business group matching TOKEN."""
    setup_logging(verbose)

    try:
        resolver = BusinessGroupResolver(_build_directory(url, config))
        label = resolver.name_of(token)
    except BusinessGroupError as e:
        _fail(e, verbose)

    print(label)


@app.command()
def version() -> None:
    """Show version information."""
    from . import __version__
    console.print(f"Business Group Resolver v{__version__}")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
