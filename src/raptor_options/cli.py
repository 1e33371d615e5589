"""Typer CLI for raptor-options.

Commands:
  list      List options, optionally filtered by area
  describe  Describe one option by name
  lookup    Find the option named by a canonical option URI
  check     Validate name=value option assignments for an area
"""

from __future__ import annotations

import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from raptor_options.config import get_settings
from raptor_options.registry import OptionRegistry
from raptor_options.state import OptionState
from raptor_options.types import OptionArea, OptionDescriptor, value_type_label
from raptor_options.values import apply_assignments

app = typer.Typer(
    name="raptor-options",
    help="Inspect the raptor parser and serializer option registry",
    no_args_is_help=True,
)
console = Console()

AREA_NAMES: dict[str, OptionArea] = {
    "parser": OptionArea.PARSER,
    "serializer": OptionArea.SERIALIZER,
    "turtle-writer": OptionArea.TURTLE_WRITER,
    "xml-writer": OptionArea.XML_WRITER,
    "sax2": OptionArea.SAX2,
}


@app.callback()
def main() -> None:
    logging.basicConfig(
        level=get_settings().log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _parse_area(area: str) -> OptionArea:
    parsed = AREA_NAMES.get(area.strip().lower())
    if parsed is None:
        console.print(
            f"[red]Unknown area '{area}'. Available: {', '.join(AREA_NAMES)}[/red]"
        )
        raise typer.Exit(1)
    return parsed


def _area_names(area: OptionArea) -> list[str]:
    return [name for name, flag in AREA_NAMES.items() if area & flag]


def _describe(registry: OptionRegistry, d: OptionDescriptor) -> dict[str, object]:
    return {
        "id": int(d.option),
        "name": d.name,
        "uri": str(registry.option_uri(d.option)),
        "type": value_type_label(d.value_type),
        "areas": _area_names(d.area),
        "label": d.label,
    }


@app.command("list")
def list_options(
    area: Annotated[
        str | None, typer.Option("--area", "-a", help=f"One of: {', '.join(AREA_NAMES)}")
    ] = None,
    format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: text or json")
    ] = "text",
) -> None:
    """List options, optionally only those valid for one area."""
    registry = OptionRegistry()
    if area is None:
        descriptors = list(registry.catalog)
    else:
        descriptors = registry.catalog.options_for_area(_parse_area(area))

    if format == "json":
        console.print_json(data=[_describe(registry, d) for d in descriptors])
        return

    table = Table(title=f"Options ({len(descriptors)})")
    table.add_column("ID", justify="right")
    table.add_column("Name", style="cyan")
    table.add_column("Type", style="green")
    table.add_column("Areas")
    table.add_column("Label")
    for d in descriptors:
        table.add_row(
            str(int(d.option)),
            d.name,
            value_type_label(d.value_type) or "",
            ", ".join(_area_names(d.area)),
            d.label,
        )
    console.print(table)


@app.command()
def describe(
    name: Annotated[str, typer.Argument(help="Option short name, e.g. scanForRDF")],
    format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: text or json")
    ] = "text",
) -> None:
    """Describe a single option."""
    registry = OptionRegistry()
    d = registry.catalog.get_by_name(name)
    if d is None:
        console.print(f"[red]Unknown option '{name}'[/red]")
        raise typer.Exit(1)

    info = _describe(registry, d)
    if format == "json":
        console.print_json(data=info)
        return

    console.print(f"[bold]{d.name}[/bold] ({info['id']})")
    console.print(f"  URI: {info['uri']}")
    console.print(f"  Type: {info['type']}")
    console.print(f"  Areas: {', '.join(info['areas'])}")
    console.print(f"  Label: {d.label}")


@app.command()
def lookup(
    uri: Annotated[str, typer.Argument(help="Canonical option URI")],
) -> None:
    """Find the option named by a canonical option URI."""
    registry = OptionRegistry()
    option = registry.option_from_uri(uri)
    if option is None:
        console.print(f"[red]No option for URI {uri}[/red]")
        raise typer.Exit(1)

    d = registry.catalog.get(option)
    console.print(f"{int(option)} {d.name}")


@app.command()
def check(
    assignments: Annotated[
        list[str], typer.Argument(help="Option assignments: name=value or bare boolean name")
    ],
    area: Annotated[str, typer.Option("--area", "-a", help="Area the options are set for")],
) -> None:
    """Validate option assignments for an area and print the coerced values."""
    registry = OptionRegistry()
    state = OptionState(_parse_area(area), registry.catalog)

    try:
        options = apply_assignments(state, assignments, registry)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from None

    for option in options:
        d = registry.catalog.get(option)
        console.print(f"  [cyan]{d.name}[/cyan] = {state.get(option)!s}")
