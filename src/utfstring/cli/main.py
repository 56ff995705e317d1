"""CLI entry point for utfstring.

Invoked as::

    utfstring [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m utfstring.cli.main

Commands
--------
length       Show logical and code-unit length
inspect      Break text into logical characters (table, JSON or YAML)
slice        Slice text by character index
substr       Take a run of characters from a start index
index        Find the character index of a substring
pad          Pad text to a character length
codepoints   List the code points of every character
bytes        Show the big-endian code-unit bytes
classifiers  List registered classifier variants
version      Show version information

Negative indices must follow ``--`` so they are not read as options::

    utfstring substr -- "a🙂b" -1 1
"""
from __future__ import annotations

import json
import logging
import sys

import click
import yaml
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from utfstring.classifier.registry import ClassifierNotFoundError, classifier_registry
from utfstring.ops.ranges import RangeOps
from utfstring.units.codec import decode_code_points, from_code_units, to_code_units

console = Console()
err_console = Console(stderr=True)

_variant_option = click.option(
    "--variant",
    "-v",
    default="default",
    show_default=True,
    help="Classifier variant: 'default' (surrogate pairs) or 'visual' (also flags).",
)


def _ops_or_exit(variant: str) -> RangeOps:
    """Build range operations for ``variant``, exiting on an unknown name."""
    try:
        return RangeOps(classifier_registry.get(variant))
    except ClassifierNotFoundError as exc:
        err_console.print(f"[red]Error:[/red] {exc.args[0]}")
        sys.exit(1)


def _print_text(units: str) -> None:
    console.print(Text(from_code_units(units)))


def _format_code_point(code_point: int) -> str:
    return f"U+{code_point:04X}"


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="utfstring")
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Logical-character indexing over UTF-16 text."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# ---------------------------------------------------------------------------
# version / classifiers commands
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from utfstring import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]utfstring[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


@cli.command(name="classifiers")
def classifiers_command() -> None:
    """List registered classifier variants, including entry-point plugins."""
    classifier_registry.load_entrypoints()

    table = Table(title="Classifiers")
    table.add_column("Name", style="bold")
    table.add_column("Class")
    for name in classifier_registry.list_classifiers():
        table.add_row(name, classifier_registry.get_class(name).__qualname__)
    console.print(table)


# ---------------------------------------------------------------------------
# length / inspect commands
# ---------------------------------------------------------------------------


@cli.command(name="length")
@click.argument("text")
@_variant_option
def length_command(text: str, variant: str) -> None:
    """Show the logical and code-unit length of TEXT."""
    ops = _ops_or_exit(variant)
    units = to_code_units(text)

    table = Table(show_header=False, box=None)
    table.add_row("[bold]characters[/bold]", str(ops.mapper.logical_length(units)))
    table.add_row("[bold]code units[/bold]", str(len(units)))
    console.print(table)


@cli.command(name="inspect")
@click.argument("text")
@_variant_option
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json", "yaml"], case_sensitive=False),
    default="table",
    help="Output format",
)
def inspect_command(text: str, variant: str, output_format: str) -> None:
    """Break TEXT into logical characters."""
    ops = _ops_or_exit(variant)
    units = to_code_units(text)

    rows: list[dict[str, object]] = []
    for index, (offset, span) in enumerate(ops.classifier.iter_spans(units)):
        char_units = units[offset:offset + span]
        rows.append({
            "index": index,
            "offset": offset,
            "span": span,
            "char": from_code_units(char_units),
            "code_units": [f"{ord(unit):04X}" for unit in char_units],
            "code_points": [_format_code_point(cp) for cp in decode_code_points(char_units)],
        })

    if output_format == "json":
        console.print(Syntax(json.dumps(rows, indent=2, ensure_ascii=False), "json"))
        return
    if output_format == "yaml":
        dumped = yaml.dump(rows, default_flow_style=False, allow_unicode=True, sort_keys=False)
        console.print(Syntax(dumped, "yaml"))
        return

    table = Table(title=f"{len(rows)} character(s), {len(units)} code unit(s)")
    table.add_column("Index", justify="right")
    table.add_column("Offset", justify="right")
    table.add_column("Span", justify="right")
    table.add_column("Char")
    table.add_column("Code units")
    table.add_column("Code points")
    for row in rows:
        table.add_row(
            str(row["index"]),
            str(row["offset"]),
            str(row["span"]),
            Text(str(row["char"])),
            " ".join(row["code_units"]),  # type: ignore[arg-type]
            " ".join(row["code_points"]),  # type: ignore[arg-type]
        )
    console.print(table)


# ---------------------------------------------------------------------------
# slice / substr / index / pad commands
# ---------------------------------------------------------------------------


@cli.command(name="slice")
@click.argument("text")
@click.argument("start", type=int)
@click.argument("end", type=int, required=False, default=None)
@_variant_option
def slice_command(text: str, start: int, end: int | None, variant: str) -> None:
    """Print the characters of TEXT from START up to END."""
    ops = _ops_or_exit(variant)
    _print_text(ops.slice(to_code_units(text), start, end))


@cli.command(name="substr")
@click.argument("text")
@click.argument("start", type=int)
@click.argument("length", type=int, required=False, default=None)
@_variant_option
def substr_command(text: str, start: int, length: int | None, variant: str) -> None:
    """Print LENGTH characters of TEXT beginning at START."""
    ops = _ops_or_exit(variant)
    _print_text(ops.substr(to_code_units(text), start, length))


@cli.command(name="index")
@click.argument("text")
@click.argument("needle")
@click.option("--start", type=int, default=None, help="Character index to search from")
@click.option("--last", is_flag=True, default=False, help="Find the last occurrence")
@_variant_option
def index_command(text: str, needle: str, start: int | None, last: bool, variant: str) -> None:
    """Print the character index of NEEDLE in TEXT (-1 when absent)."""
    ops = _ops_or_exit(variant)
    units = to_code_units(text)
    needle_units = to_code_units(needle)
    if last:
        result = ops.last_index_of(units, needle_units, start)
    else:
        result = ops.index_of(units, needle_units, 0 if start is None else start)
    console.print(result)
    if result < 0:
        sys.exit(1)


@cli.command(name="pad")
@click.argument("text")
@click.argument("target", type=int)
@click.option("--with", "pad_text", default=" ", show_default=True, help="Padding text")
@click.option("--end", "at_end", is_flag=True, default=False, help="Pad at the end instead")
@_variant_option
def pad_command(text: str, target: int, pad_text: str, at_end: bool, variant: str) -> None:
    """Pad TEXT to TARGET characters."""
    ops = _ops_or_exit(variant)
    units = to_code_units(text)
    pad_units = to_code_units(pad_text)
    if at_end:
        _print_text(ops.pad_end(units, target, pad_units))
    else:
        _print_text(ops.pad_start(units, target, pad_units))


# ---------------------------------------------------------------------------
# codepoints / bytes commands
# ---------------------------------------------------------------------------


@cli.command(name="codepoints")
@click.argument("text")
@_variant_option
def codepoints_command(text: str, variant: str) -> None:
    """List the code points of TEXT."""
    ops = _ops_or_exit(variant)
    code_points = ops.to_code_points(to_code_units(text))
    console.print(" ".join(_format_code_point(cp) for cp in code_points))


@cli.command(name="bytes")
@click.argument("text")
def bytes_command(text: str) -> None:
    """Show TEXT as big-endian code-unit bytes in hex."""
    console.print(RangeOps.to_bytes(to_code_units(text)).hex(" "))


if __name__ == "__main__":
    cli()
