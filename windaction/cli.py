"""CLI interface for windaction."""

import json
import logging
from pathlib import Path

import click

from windaction import __version__
from windaction.engine import calculate as calculate_peak_pressure
from windaction.schemas import WindActionInput
from windaction.settings import LOG_FORMAT, get_settings
from windaction.tables import export_to_csv, height_profile


def _input_options(func):
    """Options shared by the commands that take a site and wind description."""
    options = [
        click.option("--altitude", type=int, default=0, show_default=True, help="Site altitude in m"),
        click.option(
            "--wind-speed",
            type=int,
            default=28,
            show_default=True,
            help="Fundamental basic wind speed in m/s (28, 32, 36)",
        ),
        click.option(
            "--probability",
            type=float,
            default=0.02,
            show_default=True,
            help="Annual probability of exceedance",
        ),
        click.option(
            "--terrain", type=str, default="A", show_default=True, help="Terrain category (A, B, C, D)"
        ),
        click.option(
            "--topography", type=float, default=1.0, show_default=True, help="Topography factor Co(z)"
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.group()
@click.version_option(version=__version__)
def main():
    """Windaction - SANS 10160-3 peak wind speed pressure calculator."""
    logging.basicConfig(level=get_settings().log_level, format=LOG_FORMAT)


@main.command()
@_input_options
@click.option("--height", type=float, default=1.0, show_default=True, help="Height above terrain in m")
@click.option("--project-name", type=str, help="Project name")
@click.option("--output", type=click.Path(), help="Output JSON file path")
def calculate(
    altitude: int,
    wind_speed: int,
    probability: float,
    terrain: str,
    topography: float,
    height: float,
    project_name: str | None,
    output: str | None,
):
    """Calculate the peak wind speed pressure at one height."""
    try:
        data = WindActionInput(
            altitude_m=altitude,
            fundamental_basic_wind_speed=wind_speed,
            probability_of_exceedance=probability,
            height_m=height,
            terrain_category=terrain,
            topography_factor=topography,
            project_name=project_name,
        )
        result = calculate_peak_pressure(data)
    except ValueError as e:
        raise click.UsageError(str(e))

    result_json = json.dumps(result.model_dump(), indent=2)

    if output:
        Path(output).write_text(result_json)
        click.echo(f"Results saved to {output}")
    else:
        click.echo(result_json)


@main.command()
@_input_options
@click.option(
    "--heights",
    type=str,
    help="Comma-separated heights in m (defaults to WINDACTION_PROFILE_HEIGHTS)",
)
@click.option("--output", type=click.Path(), help="Output CSV file path")
def profile(
    altitude: int,
    wind_speed: int,
    probability: float,
    terrain: str,
    topography: float,
    heights: str | None,
    output: str | None,
):
    """Tabulate the peak wind speed pressure over several heights."""
    if heights:
        try:
            height_values = [float(h) for h in heights.split(",") if h.strip()]
        except ValueError:
            raise click.BadParameter(f"could not parse {heights!r}", param_hint="--heights")
        if not height_values:
            raise click.BadParameter("at least one height is required", param_hint="--heights")
    else:
        height_values = get_settings().profile_heights

    try:
        data = WindActionInput(
            altitude_m=altitude,
            fundamental_basic_wind_speed=wind_speed,
            probability_of_exceedance=probability,
            terrain_category=terrain,
            topography_factor=topography,
        )
        df = height_profile(data, height_values)
    except ValueError as e:
        raise click.UsageError(str(e))

    if output:
        export_to_csv(df, output)
        click.echo(f"Profile saved to {output}")
    else:
        click.echo(df.to_string(index=False))


@main.command()
def serve():
    """Start the FastAPI server (JSON API)."""
    import uvicorn

    settings = get_settings()
    click.echo(f"Starting Windaction server on http://{settings.host}:{settings.port}")
    uvicorn.run("windaction.api:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
