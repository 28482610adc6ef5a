# cli.py
"""Command-line entry point: prints one estimate of pi."""

import sys

from fire import Fire

from .config import EstimatorConfig, configure_logging
from .errors import EstimatorError
from .estimator import Estimator


def run():
    """Estimate pi with the default parameters."""
    try:
        configure_logging()
        Estimator(EstimatorConfig()).run()
    except EstimatorError as e:
        print(f"pi-estimator: {e}", file=sys.stderr)
        sys.exit(1)


def main(argv=None):
    """Run the estimator. ``argv`` (or sys.argv) is accepted and ignored."""
    # Fire never sees user input, so its own flags (--help, --trace, ...) stay inert.
    Fire(run, command=[])


if __name__ == '__main__':
    main()
