"""
main.py
-------
Command-line entry point.

Usage:
    frogger                      # assets/ in the current directory
    frogger --assets path/to/dir
    frogger --seed 42            # reproducible bug and gem placement
    frogger --log-level verbose  # also print per-frame traces
"""

import argparse
import random
import sys

from frogger.core.debug.debug_logger import LoggerConfig
from frogger.core.runtime.main_loop import MainLoop


def main(argv=None):
    parser = argparse.ArgumentParser(description="Cross the road, dodge the bugs, reach the lake.")
    parser.add_argument("--assets", default=None,
                        help="Directory containing the images/ folder")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for enemy and gem randomness")
    parser.add_argument("--log-level", default=None, type=str.upper,
                        choices=LoggerConfig.LEVELS,
                        help="Console log verbosity (overrides FROGGER_LOG_LEVEL)")
    args = parser.parse_args(argv)

    LoggerConfig.configure_from_env()
    if args.log_level:
        LoggerConfig.configure(level=args.log_level)

    rng = random.Random(args.seed) if args.seed is not None else None
    MainLoop(asset_root=args.assets, rng=rng).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
