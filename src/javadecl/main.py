"""javadecl CLI - List the declarations of Java source files."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from javadecl.config import default_config_path, default_output_path, load_config
from javadecl.errors import JavaDeclError
from javadecl.runner import RunResult, run

console = Console()


class ConsoleLineHandler(logging.Handler):
    """Print each log record as one unwrapped line on a rich console."""

    def __init__(self, console: Console, level: int = logging.NOTSET):
        super().__init__(level)
        self.console = console

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            self.console.print(message, soft_wrap=True, markup=False, highlight=False)
        except Exception:
            self.handleError(record)


def _configure_logging(level: int, target: Console) -> None:
    """Route javadecl log records to the console, message text only."""
    logger = logging.getLogger("javadecl")
    for handler in list(logger.handlers):
        if isinstance(handler, ConsoleLineHandler):
            logger.removeHandler(handler)

    handler = ConsoleLineHandler(target)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)


def _print_summary(result: RunResult) -> None:
    table = Table(title="Extraction Complete")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Files Processed", str(len(result.records)))
    table.add_row("Declarations", str(result.declaration_count))
    table.add_row("Output", str(result.output_path))

    console.print(table)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="javadecl",
        description="Extract class, method, field and constructor declarations from Java files",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help=f"JSON file listing the files to scan (default: {default_config_path()})",
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help=f"Where to write the JSON output (default: {default_output_path()})",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug output",
    )
    verbosity.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only report warnings and errors",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    _configure_logging(level, console)

    try:
        config = load_config(args.config)
        result = run(config, output_path=args.output)
    except JavaDeclError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        return 1

    if not args.quiet:
        _print_summary(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
