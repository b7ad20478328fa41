"""Typer-based CLI for necsizing operations."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import pandas as pd
import typer

from .errors import CircuitDefinitionError, NECSizingError
from .factors import NECEdition, adjustment_factor_for_count
from .report import circuit_summary, conduit_fill_table, write_csv
from .schema import load_circuits_file
from .tables.conduits import ConduitType
from .tables.sizes import Insulation, Metal, Size
from .wiring.conductor import Conductor
from .wiring.conduit import Conduit

logger = logging.getLogger(__name__)

app = typer.Typer(help="NEC conductor, OCPD and EGC sizing")


@app.callback()
def _main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log calculation steps")) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _print_frame(df: pd.DataFrame, title: str) -> None:
    typer.echo(title)
    typer.echo(df.to_string(index=False, na_rep=""))


def _parse(parser, value: str, what: str):  # type: ignore[no-untyped-def]
    try:
        return parser(value)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint=what) from exc


@app.command()
def size(
    circuits: Path = typer.Option(..., exists=True, help="Circuit definitions JSON"),
    out: Optional[Path] = typer.Option(None, help="Summary CSV output path"),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
) -> None:
    """Size every circuit in a definitions file."""

    try:
        definitions = load_circuits_file(circuits)
    except CircuitDefinitionError as exc:
        typer.echo("Circuit definition validation failed:")
        typer.echo(json.dumps(exc.errors, indent=2, default=str))
        raise typer.Exit(code=1)

    results = [circuit.calculate() for circuit in definitions]
    logger.info("Sized %d circuits from %s", len(results), circuits)
    if as_json:
        typer.echo(json.dumps([result.to_dict() for result in results], indent=2))
    else:
        _print_frame(circuit_summary(results), "Circuits")
    if out:
        write_csv(out, circuit_summary(results))
        typer.echo(f"Summary written to {out}")

    exit_code = 1 if any(not result.ok for result in results) else 0
    raise typer.Exit(code=exit_code)


@app.command()
def ampacity(
    size: str = typer.Option(..., "--size", help="Conductor size, e.g. 12 or 1/0 or 250"),
    metal: str = typer.Option("CU", help="CU or AL"),
    insulation: str = typer.Option("THHN", help="Insulation type"),
    ambient: float = typer.Option(86.0, help="Ambient temperature in °F"),
    ccc: int = typer.Option(3, help="Current-carrying conductors in the raceway"),
    rooftop: float = typer.Option(-1.0, help="Distance above the roof in inches, -1 if not on a rooftop"),
    edition: int = typer.Option(2014, help="NEC edition"),
) -> None:
    """Print the corrected and adjusted ampacity of one conductor."""

    conductor_size = _parse(Size.from_name, size, "--size")
    conductor_metal = _parse(Metal.from_symbol, metal, "--metal")
    conductor_insulation = _parse(Insulation.from_name, insulation, "--insulation")
    nec = _parse(NECEdition.from_year, str(edition), "--edition")
    try:
        conductor = Conductor(
            conductor_size,
            conductor_metal,
            conductor_insulation,
            ambient_temperature_f=ambient,
            rooftop_distance=rooftop,
            edition=nec,
        )
        adjustment = adjustment_factor_for_count(ccc)
    except NECSizingError as exc:
        raise typer.BadParameter(str(exc)) from exc
    correction = conductor.correction_factor()
    result = conductor.standard_ampacity() * correction * adjustment
    typer.echo(f"{conductor.description}")
    typer.echo(f"Standard ampacity: {conductor.standard_ampacity()} A")
    typer.echo(f"Correction factor: {correction}")
    typer.echo(f"Adjustment factor: {adjustment}")
    typer.echo(f"Ampacity: {round(result, 3)} A")


@app.command("conduit-fill")
def conduit_fill(
    size: str = typer.Option(..., "--size", help="Conductor size"),
    count: int = typer.Option(..., "--count", min=1, help="Number of conductors"),
    insulation: str = typer.Option("THHN", help="Insulation type"),
    conduit_type: str = typer.Option("EMT", "--type", help="Conduit type"),
    nipple: bool = typer.Option(False, help="The conduit is a nipple (24 in or shorter)"),
) -> None:
    """Size a conduit for ``count`` identical conductors."""

    conduit = Conduit(conduit_type=_parse(ConduitType.from_label, conduit_type, "--type"), nipple=nipple)
    template = Conductor(
        _parse(Size.from_name, size, "--size"),
        insulation=_parse(Insulation.from_name, insulation, "--insulation"),
    )
    try:
        for _ in range(count):
            conduit.add(template.copy())
    except NECSizingError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1)

    _print_frame(conduit_fill_table(conduit), "Conduit fill")
    trade = conduit.trade_size
    if trade is None:
        for message in conduit.result_messages:
            typer.echo(f"{message.severity} {message.code}: {message.message}")
        raise typer.Exit(code=1)
    typer.echo(f"Trade size: {conduit.conduit_type.label} {trade.label}")


def main() -> None:  # pragma: no cover - entry point
    app()


if __name__ == "__main__":  # pragma: no cover - module execution
    main()
