"""Allow ``python -m percolation_stats N TRIALS``."""

from .cli.main import run

if __name__ == '__main__':
    run(prog_name='percolation_stats')
