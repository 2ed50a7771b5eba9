#!/usr/bin/env python3
"""CLI entry point for importing Wise statements."""

import sys
import json
import argparse
from pathlib import Path
from dotenv import load_dotenv
from loguru import logger
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text
from rich.markup import escape

from wise_parser import parse, ParseResult, StatementParseError, StatementFileError
from wise_parser.config import get_settings
from wise_parser.export import to_summary, write_csv
from wise_parser.pdf_processor import PDFProcessor

EXIT_FILE_ERROR = 1
EXIT_PARSE_ERROR = 2


def setup_logging(verbose: bool = False):
    """Configure logging."""
    settings = get_settings()
    logger.remove()

    level = "DEBUG" if verbose else settings.log_level

    # Console logging
    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        level=level,
        colorize=True
    )

    # File logging
    log_dir = settings.log_dir
    log_dir.mkdir(parents=True, exist_ok=True)

    logger.add(
        log_dir / "wise_import.log",
        rotation="10 MB",
        retention="7 days",
        level="DEBUG",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
    )


def load_statement(path: Path, is_text: bool) -> ParseResult:
    """Parse a statement PDF, or a text file already extracted from one."""
    if is_text:
        if not path.exists():
            raise StatementFileError(f"Text file not found: {path}", path.name)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StatementFileError(f"Could not read text file: {e}", path.name) from e
        return parse(text)

    return PDFProcessor().parse_file(str(path))


def display_result(result: ParseResult, console: Console, chronological: bool = False):
    """Display parsed transactions as a table."""
    header = Text()
    header.append(f"{result.currency} statement\n", style="bold cyan")
    header.append(f"{result.date_range.from_} - {result.date_range.to}", style="italic")
    console.print(Panel(header, border_style="cyan", padding=(0, 2)))

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Date", style="cyan")
    table.add_column("Description")
    table.add_column("Reference", style="dim")
    table.add_column("Incoming", justify="right", style="green")
    table.add_column("Outgoing", justify="right", style="red")

    transactions = result.chronological() if chronological else result.transactions
    for tx in transactions:
        table.add_row(
            tx.date,
            Text(tx.description),
            Text(tx.reference),
            f"{tx.incoming:,.2f}" if tx.incoming is not None else "",
            f"{tx.outgoing:,.2f}" if tx.outgoing is not None else "",
        )

    console.print(table)
    console.print(f"[green]{len(result.transactions)}[/green] transactions")
    if result.skipped:
        console.print(f"[yellow]{result.skipped} malformed entries skipped, check the log[/yellow]")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Extract transactions from a Wise balance statement",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  wise-import statement.pdf
  wise-import statement.pdf --csv out/november.csv
  wise-import extracted.txt --text --json
        """
    )

    parser.add_argument("statement", type=Path, help="Statement PDF (or text file with --text)")
    parser.add_argument("--text", action="store_true", help="Input is pre-extracted statement text")
    parser.add_argument("--json", action="store_true", help="Print a JSON summary instead of a table")
    parser.add_argument("--csv", type=Path, default=None, help="Also write transactions to this CSV file")
    parser.add_argument("--chronological", action="store_true", help="Show transactions oldest first")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")

    return parser


def main(argv=None) -> int:
    """Main CLI function."""
    load_dotenv()
    args = build_parser().parse_args(argv)

    setup_logging(args.verbose)
    console = Console()

    try:
        result = load_statement(args.statement, args.text)
    except StatementFileError as e:
        console.print(f"[red]Error:[/red] {escape(e.message)}")
        return EXIT_FILE_ERROR
    except StatementParseError as e:
        logger.error(f"{e.error_code}: {e.message}")
        console.print(f"[red]{e.user_message}[/red] {escape(e.message)}")
        return EXIT_PARSE_ERROR

    if args.json:
        console.print_json(json.dumps(to_summary(result, args.statement.name)))
    else:
        display_result(result, console, args.chronological)

    if args.csv:
        output_path = write_csv(result, str(args.csv))
        console.print(f"[cyan]CSV saved to:[/cyan] {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
