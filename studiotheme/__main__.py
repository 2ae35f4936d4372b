"""Entry point for studiotheme."""

import argparse
import sys
import traceback
from importlib.metadata import version

from studiotheme.app import main


def get_version() -> str:
    """Get the installed package version.

    Returns:
        Version string, or "unknown" if it cannot be determined.
    """
    try:
        return version("studiotheme")
    except Exception:
        return "unknown"


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Arguments to parse. Defaults to ``sys.argv[1:]``.

    Returns:
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="studiotheme",
        description="Convert VS Code color themes into Roblox Studio script editor themes.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging on stderr")
    parser.add_argument(
        "--extensions-dir",
        help="VS Code extensions directory to search (default: ~/.vscode/extensions)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List installed VS Code themes")
    list_parser.add_argument("--columns", type=_positive_int, help="Number of columns in the grid")

    convert_parser = subparsers.add_parser("convert", help="Generate the Studio command for a theme")
    convert_parser.add_argument("theme", help="Installed theme name or path to a theme .json file")
    convert_parser.add_argument("-o", "--output", help="Write the command to this file instead of stdout")

    return parser.parse_args(argv)


def run() -> None:
    """Run the CLI with standard Python tracebacks."""
    args = parse_args()
    try:
        exit_code = main(args)
    except Exception:
        # Print standard Python traceback instead of Rich's fancy one
        traceback.print_exc()
        sys.exit(1)
    sys.exit(exit_code)


if __name__ == "__main__":
    run()
