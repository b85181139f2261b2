"""
Command-line interface for percolation_stats.

Commands:
    percolation-stats run N TRIALS [--seed S] [--verbose]
    percolation-stats run-config --config simulation.yaml

Both print the threshold estimate as:

    mean                    = 0.5929
    stddev                  = 0.0087
    95% confidence interval = [0.5912, 0.5946]
"""

import time

import click

from ..config import SimulationConfig
from ..errors import InvalidArgument
from ..percolation.statistics import PercolationStats


@click.group()
@click.version_option(package_name='percolation_stats')
def cli():
    """Percolation Stats - Monte Carlo estimation of the percolation threshold."""
    pass


def format_report(stats: PercolationStats) -> str:
    """Render the three-line summary printed by the CLI."""
    return (
        f"mean                    = {stats.mean()}\n"
        f"stddev                  = {stats.stddev()}\n"
        f"95% confidence interval = [{stats.confidence_lo()}, {stats.confidence_hi()}]"
    )


def _simulate(n, trials, seed=None, verbose=False):
    if verbose:
        click.echo(f"Running {trials} trials on a {n}x{n} grid", err=True)

    start_time = time.time()
    try:
        stats = PercolationStats(n, trials, seed=seed)
    except InvalidArgument as e:
        raise click.UsageError(str(e))

    if verbose:
        click.echo(f"✓ Completed {trials} trials in {time.time() - start_time:.2f}s", err=True)

    click.echo(format_report(stats))


@cli.command('run')
@click.argument('n', type=int)
@click.argument('trials', type=int)
@click.option('--seed', type=click.IntRange(min=0), default=None, help='Random seed for reproducible runs')
@click.option('--verbose', '-v', is_flag=True, help='Report progress on stderr')
def run(n, trials, seed, verbose):
    """Estimate the percolation threshold of an N-by-N grid over TRIALS trials."""
    _simulate(n, trials, seed=seed, verbose=verbose)


@cli.command('run-config')
@click.option('--config', '-c', 'config_file', required=True, type=click.Path(exists=True),
              help='YAML file with n, trials and optional seed')
@click.option('--verbose', '-v', is_flag=True, help='Report progress on stderr')
def run_config(config_file, verbose):
    """Estimate the percolation threshold with parameters from a YAML config."""
    try:
        config = SimulationConfig.from_yaml(config_file)
    except InvalidArgument as e:
        raise click.UsageError(f"Invalid config {config_file}: {e}")

    _simulate(config.n, config.trials, seed=config.seed, verbose=verbose)


if __name__ == '__main__':
    cli()
