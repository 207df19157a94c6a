"""Command-line entry point of the simulation."""

import sys
from typing import Optional, Sequence

from .colors import ERR
from .config import ConfigError, parse_args
from .table import Table


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run ``num_philo tt_die tt_eat tt_sleep [max_meal]``; return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        settings = parse_args(argv)
    except ConfigError as error:
        print(f"{ERR}{error}")
        return 0
    for warning in settings.warnings():
        print(f"{warning}\n")
    Table(settings).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())