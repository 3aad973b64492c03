"""
Module that contains the command line app.

Why does this file exist, and why not put this in __main__?

  You might be tempted to import things from __main__ later, but that will cause
  problems: the code will get executed twice:

  - When you run `python -mkaplanmeier` python will execute
    ``__main__.py`` as a script. That means there will not be any
    ``kaplanmeier.__main__`` in ``sys.modules``.
  - When you import __main__ it will get executed again (as a module) because
    there"s no ``kaplanmeier.__main__`` in ``sys.modules``.

  Also see (1) from https://click.palletsprojects.com/en/stable/setuptools/
"""

import warnings
from pathlib import Path

import click
import numpy as np

from kaplanmeier.errors import KaplanMeierError
from kaplanmeier.estimator import KaplanMeier
from kaplanmeier.propertyset import PropertySet


def default_params() -> PropertySet:
    """Parameters for reading an observations file: one row per subject, time and event indicator columns."""
    return PropertySet({"delimiter": ",", "time_column": 0, "event_column": 1, "skiprows": 0})


def load_observations(file: Path, params: PropertySet, verbose: bool = False):
    """
    Read observation times and event indicators from a delimited text file.

    Parameters:

        file (Path): The file to read.

        params (PropertySet): ``delimiter``, ``time_column``, ``event_column``, and ``skiprows``.

        verbose (bool): If True, echoes the file reading status. Default is False.

    Returns:

        tuple[np.ndarray, np.ndarray]: The times (float64) and event indicators (bool, True where the column is nonzero).

    Raises:

        ValueError: If the file cannot be parsed with the given parameters.
    """

    if verbose:
        click.echo(f"Reading observations from '{file}' ...")

    with warnings.catch_warnings():
        warnings.filterwarnings("ignore", message=".*input contained no data.*", category=UserWarning)
        data = np.loadtxt(
            file,
            delimiter=params.delimiter,
            usecols=(params.time_column, params.event_column),
            skiprows=params.skiprows,
            ndmin=2,
        )

    if data.size == 0:
        return np.empty(0, dtype=np.float64), np.empty(0, dtype=np.bool_)

    times = data[:, 0]
    events = data[:, 1] != 0

    if verbose:
        click.echo(f"Read {times.shape[0]:,} observations ({np.count_nonzero(events):,} events).")

    return times, events


def check_params(params: PropertySet) -> None:
    """
    Check that every reading parameter has the type of its default and that indices are non-negative.

    Raises:

        ValueError: On the first parameter that does not match.
    """

    for key, default in default_params().to_dict().items():
        value = params[key]
        # bool is an int subclass, reject it explicitly
        if type(value) is not type(default):
            raise ValueError(f"Parameter '{key}' should be of type {type(default).__name__}, got {value!r}.")
        if isinstance(value, int) and value < 0:
            raise ValueError(f"Parameter '{key}' should be >= 0, got {value}.")

    return


def _format_time(time) -> str:
    # shortest round-trip representation so distinct times print distinctly
    return str(time) if isinstance(time, int) else np.format_float_positional(time, trim="-")


def format_table(km: KaplanMeier) -> str:
    lines = [f"{'time':>12} {'nevents':>8} {'ncensor':>8} {'natrisk':>8} {'survival':>10}"]
    for time, nevents, ncensor, natrisk, survival in km.table:
        lines.append(f"{_format_time(time):>12} {nevents:>8d} {ncensor:>8d} {natrisk:>8d} {survival:>10.6f}")

    return "\n".join(lines)


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--params", "params_file", type=click.Path(exists=True, dir_okay=False, path_type=Path), help="JSON file of reading parameters.")
@click.option("--delimiter", default=None, help="Column delimiter (default ',').")
@click.option("--time-column", type=click.IntRange(min=0), default=None, help="Zero-based index of the time column (default 0).")
@click.option("--event-column", type=click.IntRange(min=0), default=None, help="Zero-based index of the event column (default 1).")
@click.option("--skiprows", type=click.IntRange(min=0), default=None, help="Number of leading lines to skip (default 0).")
@click.option("-v", "--verbose", is_flag=True, help="Report progress.")
def main(file, params_file, delimiter, time_column, event_column, skiprows, verbose):
    """Print the Kaplan-Meier estimate of the survivor function for the observations in FILE."""

    params = default_params()
    try:
        if params_file is not None:
            params <<= PropertySet.load(params_file)
        overrides = {"delimiter": delimiter, "time_column": time_column, "event_column": event_column, "skiprows": skiprows}
        params <<= {key: value for key, value in overrides.items() if value is not None}
        check_params(params)
    except ValueError as ex:
        raise click.BadParameter(str(ex), param_hint="--params") from ex

    if verbose:
        click.echo(f"Parameters:\n{params}")

    try:
        times, events = load_observations(file, params, verbose)
        km = KaplanMeier.fit(times, events)
    except KaplanMeierError as ex:
        raise click.ClickException(str(ex)) from ex
    except ValueError as ex:
        raise click.ClickException(f"Could not read '{file}': {ex}") from ex

    if verbose:
        click.echo(f"Estimate has {len(km):,} rows.")

    click.echo(format_table(km))
