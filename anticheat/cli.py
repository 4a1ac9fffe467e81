"""Command-line entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from anticheat.app import DEFAULT_TARGET, run
from anticheat.errors import ControllerError

logger = logging.getLogger("anticheat")


def main(argv: list[str] | None = None) -> int:
    """Run the anti-cheat flow; return 0 on success and 1 on failure."""
    parser = argparse.ArgumentParser(
        prog="anticheat", description="Launch and supervise a target process."
    )
    parser.add_argument(
        "target",
        nargs="?",
        default=DEFAULT_TARGET,
        help="executable to launch (default: %(default)s)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(format="[%(levelname)s] %(message)s")
    logger.setLevel(logging.DEBUG)

    logger.info("Anti-Cheat started")
    try:
        run(args.target, sys.stdout)
    except ControllerError as exc:
        logger.critical("Anti-Cheat failed\n%s", exc.describe())
        return 1
    logger.info("Anti-Cheat exiting")
    return 0


if __name__ == "__main__":
    sys.exit(main())