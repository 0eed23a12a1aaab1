"""Typer CLI for cutting board design."""

import json
import logging
import random
from pathlib import Path
from typing import Annotated

import typer

from cuttingboards.application import (
    CalculateRequirementsCommand,
    DesiredBoardInput,
    GenerateDesignsCommand,
    RegeneratePatternCommand,
    StockPieceInput,
)
from cuttingboards.application.config import (
    ConfigError,
    DesignerConfiguration,
    config_to_construction_config,
    config_to_desired_board,
    config_to_pattern,
    config_to_stock,
    load_config,
)
from cuttingboards.domain import (
    ConstructionConfig,
    DesignOption,
    InvalidDesignOptionError,
    PatternNotFoundError,
    get_woven_pattern,
)
from cuttingboards.domain.services import list_woven_patterns
from cuttingboards.infrastructure import (
    DesignOptionFormatter,
    JsonExporter,
    RequirementReportFormatter,
)

app = typer.Typer(
    name="cuttingboards",
    help="Design laminated cutting boards and estimate stock requirements.",
    no_args_is_help=True,
)

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to JSON project file"),
]
StockOption = Annotated[
    list[str] | None,
    typer.Option(
        "--stock",
        "-s",
        help="Stock entry as WOOD:THICKNESSxWIDTHxLENGTH:QTY (repeatable)",
    ),
]
FormatOption = Annotated[
    str,
    typer.Option("--format", "-f", help="Output format: text or json"),
]
OutputOption = Annotated[
    Path | None,
    typer.Option("--output", "-o", help="Write output to this file instead of stdout"),
]


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """Cutting board designer."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_project(config_file: Path | None) -> DesignerConfiguration | None:
    if config_file is None:
        return None
    try:
        return load_config(config_file)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _resolve_stock(
    project: DesignerConfiguration | None, stock_specs: list[str] | None
) -> list[StockPieceInput]:
    """Stock from --stock options, falling back to the project file."""
    if stock_specs:
        try:
            return [StockPieceInput.parse(spec) for spec in stock_specs]
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
    if project is not None:
        return config_to_stock(project)
    typer.echo("Error: provide --stock entries or a --config file", err=True)
    raise typer.Exit(code=1)


def _check_format(output_format: str) -> str:
    fmt = output_format.lower()
    if fmt not in ("text", "json"):
        typer.echo(f"Unknown format: {output_format}. Use text or json.", err=True)
        raise typer.Exit(code=1)
    return fmt


def _emit(content: str, output_file: Path | None) -> None:
    if output_file is None:
        typer.echo(content)
        return
    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(content + "\n", encoding="utf-8")
    typer.echo(f"Wrote {output_file}")


def _fail_on_errors(errors: list[str]) -> None:
    if errors:
        typer.echo("Error:", err=True)
        for error in errors:
            typer.echo(f"  - {error}", err=True)
        raise typer.Exit(code=1)


def _emit_options(
    options: list[DesignOption], fmt: str, output_file: Path | None
) -> None:
    if fmt == "json":
        _emit(JsonExporter().export_options(options), output_file)
    else:
        _emit(DesignOptionFormatter().format(options), output_file)


@app.command()
def designs(
    config_file: ConfigOption = None,
    stock: StockOption = None,
    segment_width: Annotated[
        float | None,
        typer.Option("--segment-width", help="End-grain slice width in inches"),
    ] = None,
    kerf: Annotated[
        float | None,
        typer.Option("--kerf", help="Saw kerf width in inches"),
    ] = None,
    output_format: FormatOption = "text",
    output_file: OutputOption = None,
) -> None:
    """Generate face, edge and end-grain design options."""
    fmt = _check_format(output_format)
    project = _load_project(config_file)
    stock_inputs = _resolve_stock(project, stock)

    base = config_to_construction_config(project) if project else ConstructionConfig()
    try:
        config = ConstructionConfig(
            segment_width=segment_width if segment_width is not None else base.segment_width,
            kerf_width=kerf if kerf is not None else base.kerf_width,
        )
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    result = GenerateDesignsCommand().execute(stock_inputs, config)
    _fail_on_errors(result.errors)
    _emit_options(result.options, fmt, output_file)


@app.command()
def regenerate(
    options_file: Annotated[
        Path,
        typer.Option("--options", help="JSON file of design options from 'designs -f json'"),
    ],
    config_file: ConfigOption = None,
    stock: StockOption = None,
    seed: Annotated[
        int | None,
        typer.Option("--seed", help="Random seed for a repeatable arrangement"),
    ] = None,
    output_format: FormatOption = "text",
    output_file: OutputOption = None,
) -> None:
    """Shuffle the gluing pattern of saved design options."""
    fmt = _check_format(output_format)
    project = _load_project(config_file)
    stock_inputs = _resolve_stock(project, stock)

    try:
        raw = json.loads(options_file.read_text(encoding="utf-8"))
        if not isinstance(raw, list):
            raise InvalidDesignOptionError("Expected a JSON list of design options")
        options = [DesignOption.from_dict(item) for item in raw]
    except (OSError, json.JSONDecodeError, InvalidDesignOptionError) as e:
        typer.echo(f"Error reading options: {e}", err=True)
        raise typer.Exit(code=1)

    rng = random.Random(seed) if seed is not None else None
    result = RegeneratePatternCommand(rng).execute(options, stock_inputs)
    _fail_on_errors(result.errors)
    _emit_options(result.options, fmt, output_file)


@app.command()
def requirements(
    config_file: ConfigOption = None,
    stock: StockOption = None,
    width: Annotated[
        float | None, typer.Option("--width", "-w", help="Desired width in inches")
    ] = None,
    length: Annotated[
        float | None, typer.Option("--length", "-l", help="Desired length in inches")
    ] = None,
    thickness: Annotated[
        float | None,
        typer.Option("--thickness", "-t", help="Desired thickness in inches"),
    ] = None,
    pattern_key: Annotated[
        str | None,
        typer.Option("--pattern", "-p", help="Woven pattern key (see 'patterns')"),
    ] = None,
    main_index: Annotated[
        int | None, typer.Option("--main", help="Stock index of the main color")
    ] = None,
    accent_index: Annotated[
        int | None, typer.Option("--accent", help="Stock index of the accent color")
    ] = None,
    output_format: FormatOption = "text",
    output_file: OutputOption = None,
) -> None:
    """Estimate how many stock boards a desired board needs."""
    fmt = _check_format(output_format)
    project = _load_project(config_file)
    stock_inputs = _resolve_stock(project, stock)

    desired = (
        config_to_desired_board(project)
        if project
        else DesiredBoardInput(width=20.0, length=16.0, thickness=1.5)
    )
    if width is not None:
        desired.width = width
    if length is not None:
        desired.length = length
    if thickness is not None:
        desired.thickness = thickness

    pattern, main, accent = config_to_pattern(project) if project else (None, 0, 1)
    if pattern_key is not None:
        try:
            pattern = get_woven_pattern(pattern_key)
        except PatternNotFoundError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
    if main_index is not None:
        main = main_index
    if accent_index is not None:
        accent = accent_index

    result = CalculateRequirementsCommand().execute(
        desired, stock_inputs, pattern=pattern, main_index=main, accent_index=accent
    )
    _fail_on_errors(result.errors)
    report = result.report
    if report is None:
        typer.echo("Error: no requirement report was produced", err=True)
        raise typer.Exit(code=1)

    if fmt == "json":
        _emit(JsonExporter().export_report(report), output_file)
    else:
        _emit(RequirementReportFormatter().format(report), output_file)


@app.command()
def patterns() -> None:
    """List the available woven patterns."""
    typer.echo("Available woven patterns:")
    for pattern in list_woven_patterns():
        typer.echo(f"  {pattern.key:<20} {pattern.name}")
        typer.echo(f"  {'':<20} {pattern.description}")


if __name__ == "__main__":
    app()
