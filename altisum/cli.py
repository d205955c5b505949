"""
CLI for replaying recorded pressure data.

Usage:
    altisum replay pressure.csv
    altisum replay pressure.csv --column 2 --threshold 2.0 --trace
    altisum altitude 954.6
"""

import csv
import logging
import sys
from typing import Iterator, List, Optional

import click

from altisum.config import LOG_LEVELS, configure_logging, settings
from altisum.features.barometer import (
    AltitudeSumManager,
    InMemorySensorProvider,
    SessionState,
    TrackPoint,
    make_smoothing_function,
)
from altisum.shared.formulas import pressure_to_altitude

logger = logging.getLogger(__name__)


def read_pressure_values(lines: Iterator[str], column: int = 0) -> List[float]:
    """
    Parse pressure values (hPa) from CSV lines.

    Rows without a number in the given column (headers, blanks, garbage)
    are skipped with a warning.
    """
    values = []
    for row_number, row in enumerate(csv.reader(lines), start=1):
        if not row:
            continue
        try:
            values.append(float(row[column]))
        except (IndexError, ValueError):
            logger.warning(f"Skipping row {row_number}: no pressure value in column {column}")
    return values


@click.group()
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Override ALTISUM_LOG_LEVEL"
)
def cli(log_level):
    """Barometric altitude gain/loss tools."""
    configure_logging(log_level)


@cli.command()
@click.argument("source", type=click.File("r"))
@click.option("--column", default=0, type=int, help="CSV column holding hPa values")
@click.option("--smoothing", default=None, type=float, help="Override smoothing factor (0-1]")
@click.option("--threshold", default=None, type=float, help="Override noise threshold in metres")
@click.option("--trace", is_flag=True, help="Print running totals after every reading")
def replay(source, column, smoothing, threshold, trace):
    """
    Replay recorded pressure readings and print altitude gain/loss.

    SOURCE is a text/CSV file with one reading per row, or - for stdin.
    """
    values = read_pressure_values(source, column)
    if not values:
        click.echo("No pressure readings found.", err=True)
        sys.exit(1)

    try:
        smoothing_function = make_smoothing_function(
            smoothing_factor=smoothing if smoothing is not None else settings.smoothing_factor,
            threshold_m=threshold if threshold is not None else settings.altitude_change_threshold_m,
            reference_hpa=settings.reference_pressure_hpa,
        )
    except ValueError as e:
        raise click.BadParameter(str(e))

    provider = InMemorySensorProvider()
    manager = AltitudeSumManager(smoothing=smoothing_function)
    if manager.start(provider) != SessionState.ARMED:
        click.echo("Pressure sensor replay could not be started.", err=True)
        sys.exit(1)

    if trace:
        click.echo(f"{'#':>5} | {'hPa':>9} | {'Gain':>8} | {'Loss':>8}")
        click.echo("-" * 40)

    for i, value in enumerate(values, start=1):
        provider.emit(value)
        if trace:
            click.echo(
                f"{i:>5} | {value:>9.2f} | "
                f"{manager.get_altitude_gain():>7.1f}m | {manager.get_altitude_loss():>7.1f}m"
            )

    track_point = manager.fill(TrackPoint())
    manager.stop(provider)

    click.echo(f"Readings:      {len(values)}")
    click.echo(f"Altitude gain: {_format_metres(track_point.altitude_gain)}")
    click.echo(f"Altitude loss: {_format_metres(track_point.altitude_loss)}")


@cli.command()
@click.argument("pressure_hpa", type=float)
@click.option(
    "--reference",
    default=None,
    type=float,
    help="Reference pressure in hPa (default: ALTISUM_REFERENCE_PRESSURE_HPA)"
)
def altitude(pressure_hpa, reference):
    """Convert a pressure reading to altitude."""
    if pressure_hpa <= 0:
        raise click.BadParameter("pressure must be positive")
    reference_hpa = reference if reference is not None else settings.reference_pressure_hpa
    if reference_hpa <= 0:
        raise click.BadParameter("reference must be positive")

    click.echo(f"{pressure_to_altitude(pressure_hpa, reference_hpa):.1f} m")


def _format_metres(value: Optional[float]) -> str:
    if value is None:
        return "n/a"
    return f"{value:.1f} m"


if __name__ == "__main__":
    cli()
