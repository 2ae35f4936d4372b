"""Command implementations for the studiotheme CLI."""

import argparse
import asyncio
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from studiotheme.errors import StudioThemeError
from studiotheme.generator import convert
from studiotheme.locator import get_available_themes, resolve_theme, theme_names
from studiotheme.logger import enable_console_logging, get_logger
from studiotheme.settings import Settings, get_extensions_dir, load_settings
from studiotheme.table import print_grid

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


async def list_themes(extensions_dir: Path, columns: int, console: Console) -> int:
    """Print the installed themes as a grid."""
    themes = await get_available_themes(extensions_dir)
    if not themes:
        console.print(f"[yellow]No themes found in {escape(str(extensions_dir))}[/yellow]")
        return EXIT_OK
    print_grid(theme_names(themes), columns, console=console)
    return EXIT_OK


async def convert_theme(
    theme: str,
    extensions_dir: Path,
    output: Path | None,
    console: Console,
    err_console: Console,
) -> int:
    """Convert a theme and emit the Studio command.

    The command goes to ``output`` when given, otherwise to stdout. Settings the
    theme has no color for are reported on stderr.
    """
    theme_file = await resolve_theme(theme, extensions_dir)
    if theme_file is None:
        err_console.print(f"[red]Could not find a theme named {escape(theme)!r}.[/red]")
        err_console.print("Run [bold]studiotheme list[/bold] to see the installed themes.")
        return EXIT_FAILURE

    try:
        command, missing = await convert(theme_file)
    except StudioThemeError as exc:
        logger.error(str(exc))
        err_console.print(f"[red]{escape(str(exc))}[/red]")
        return EXIT_FAILURE

    if output is not None:
        try:
            output.write_text(command + "\n", encoding="utf-8")
        except OSError as exc:
            logger.error(f"Failed to write {output}: {exc}")
            err_console.print(f"[red]Could not write {escape(str(output))}: {escape(str(exc))}[/red]")
            return EXIT_FAILURE
        err_console.print(f"[green]Wrote Studio command to {escape(str(output))}[/green]")
    else:
        console.out(command, highlight=False)

    if missing:
        err_console.print(f"[yellow]The theme has no color for {len(missing)} setting(s):[/yellow]")
        for name in missing:
            err_console.print(f"[yellow]  - {escape(name)}[/yellow]")

    return EXIT_OK


def main(args: argparse.Namespace, settings: Settings | None = None) -> int:
    """Run the command selected on the command line.

    Args:
        args: Parsed command line arguments.
        settings: Settings to use. Loaded from disk when omitted.

    Returns:
        Process exit code.
    """
    settings = settings or load_settings()
    enable_console_logging("DEBUG" if args.verbose else settings.log_level)

    extensions_dir = Path(args.extensions_dir) if args.extensions_dir else get_extensions_dir(settings)
    console = Console()
    err_console = Console(stderr=True)

    logger.debug(f"Running {args.command!r} with extensions directory {extensions_dir}")
    if args.command == "list":
        columns = args.columns or settings.grid_columns
        return asyncio.run(list_themes(extensions_dir, columns, console))

    output = Path(args.output) if args.output else None
    return asyncio.run(convert_theme(args.theme, extensions_dir, output, console, err_console))
