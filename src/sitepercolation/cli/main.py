"""Command-line interface for sitepercolation.

Provides CLI commands for replaying site lists and running trials.
"""

import importlib.metadata
import sys

import click

__all__ = ["cli"]

try:
    __version__ = importlib.metadata.version("sitepercolation")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.3.0"  # Fallback for development


@click.group()
@click.version_option(version=__version__, prog_name="sitepercolation")
def cli() -> None:
    """Site percolation on N-by-N grids backed by union-find.

    Use 'sitepercolation COMMAND --help' for command-specific help.
    """


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--log",
    "log_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Append JSONL audit events to this file",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output and log every site opening",
)
def replay(input_path: str, log_path: str | None, verbose: bool) -> None:
    """Open the sites listed in INPUT_PATH and report percolation.

    INPUT_PATH holds the grid size N followed by 'row col' pairs
    (1-indexed), separated by any whitespace.

    Examples
    --------
        sitepercolation replay input10.txt
        sitepercolation replay input10.txt --log events.jsonl
    """
    from sitepercolation import replay as replay_file

    if verbose:
        click.echo(f"Replaying: {input_path}", err=True)

    try:
        grid, result = replay_file(input_path, log_path=log_path, trace_sites=verbose)
    except Exception as e:
        click.secho(f"✗ Error: {e}", fg="red", err=True)
        sys.exit(1)

    if verbose:
        click.echo(f"  Grid: {result.n}x{result.n}", err=True)
        click.echo(f"  Sites requested: {result.sites_requested}", err=True)
        click.echo(f"  Open sites: {result.open_sites}", err=True)
        if result.percolated_after is not None:
            click.echo(f"  Percolated after site #{result.percolated_after}", err=True)

    if result.percolated:
        click.secho(
            f"✓ PERCOLATES ({result.open_sites}/{grid.n * grid.n} sites open, "
            f"fraction {result.open_fraction:.4f})",
            fg="green",
        )
    else:
        click.echo(
            f"Does not percolate ({result.open_sites}/{grid.n * grid.n} sites open, "
            f"fraction {result.open_fraction:.4f})"
        )
    click.echo(f"elapsed time = {result.elapsed_seconds:.6f}s")


@cli.command()
@click.argument("n", type=int)
@click.option(
    "--seed",
    type=int,
    default=None,
    help="Seed for a reproducible opening order",
)
@click.option(
    "--log",
    "log_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Append JSONL audit events to this file",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output and log every site opening",
)
def simulate(n: int, seed: int | None, log_path: str | None, verbose: bool) -> None:
    """Open random sites on an N-by-N grid until it percolates.

    Reports the fraction of open sites at that moment, which is one
    estimate of the percolation threshold.

    Examples
    --------
        sitepercolation simulate 200
        sitepercolation simulate 200 --seed 42 --log events.jsonl
    """
    from sitepercolation import simulate as simulate_trial

    if verbose:
        click.echo(f"Simulating {n}x{n} grid (seed={seed})", err=True)

    try:
        result = simulate_trial(n, seed=seed, log_path=log_path, trace_sites=verbose)
    except Exception as e:
        click.secho(f"✗ Error: {e}", fg="red", err=True)
        sys.exit(1)

    if verbose:
        click.echo(f"  Open sites: {result.open_sites}", err=True)

    click.secho(f"✓ PERCOLATES at threshold {result.threshold:.6f}", fg="green")
    click.echo(f"elapsed time = {result.elapsed_seconds:.6f}s")


if __name__ == "__main__":
    cli()
