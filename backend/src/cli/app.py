"""Typer application entrypoint."""

from __future__ import annotations

import json
from typing import Optional

import typer
from rich import print as rprint
from rich.table import Table

from kennedy.config import get_settings
from kennedy.core.arch import ARCHES, ArchName, ExclusionConfig, get_arch
from kennedy.core.taxonomy import describe_tooth
from kennedy.engine import classify_dentition
from kennedy.formatting import format_report
from kennedy.selection import SelectionParseError, format_missing_text, parse_missing_text
from logging_config import configure_logging


configure_logging()


app = typer.Typer(help="Kennedy classification of partially edentulous arches")


@app.command()
def classify(
    teeth: str = typer.Argument(..., help="Comma-separated missing tooth positions (1-32)"),
    exclude_third_molars: bool = typer.Option(False, "--exclude-third-molars", help="Ignore third molars"),
    exclude_second_molars: bool = typer.Option(
        False, "--exclude-second-molars", help="Ignore second molars (implies third molars)"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print verdicts as JSON"),
) -> None:
    """Classify the maxillary and mandibular arches."""
    try:
        missing = parse_missing_text(teeth)
    except SelectionParseError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc

    exclusions = ExclusionConfig.coupled(exclude_third_molars, exclude_second_molars)
    dentition = classify_dentition(missing, exclusions)

    if as_json:
        payload = {"missing": sorted(missing), **dentition.to_dict()}
        typer.echo(json.dumps(payload, indent=2))
        return

    if dentition.is_empty():
        typer.echo("No classification (no missing teeth after exclusions).")
        return
    typer.echo(f"Missing: {format_missing_text(missing)}")
    typer.echo(format_report(dentition))


@app.command()
def teeth(
    arch: Optional[ArchName] = typer.Option(None, "--arch", help="Limit the table to one arch"),
) -> None:
    """List tooth positions with type and name."""
    arches = [get_arch(arch)] if arch else list(ARCHES)

    table = Table(title="Tooth positions")
    table.add_column("#", justify="right")
    table.add_column("Arch")
    table.add_column("Type")
    table.add_column("Name")
    for selected in arches:
        for position in selected.positions():
            descriptor = describe_tooth(position)
            table.add_row(
                str(position),
                selected.name.value,
                descriptor.tooth_type.value,
                descriptor.display_name,
            )
    rprint(table)


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (defaults to KENNEDY_API_HOST)"),
    port: Optional[int] = typer.Option(None, help="Port (defaults to KENNEDY_API_PORT)"),
) -> None:
    """Run the HTTP API under uvicorn."""
    import uvicorn

    from api.server import create_app

    settings = get_settings()
    uvicorn.run(create_app(), host=host or settings.api_host, port=port or settings.api_port)


if __name__ == "__main__":
    app()
