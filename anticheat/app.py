"""The application flow: show the banner, start the target, then stop it."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from anticheat.controller import ProcessController

logger = logging.getLogger(__name__)

DEFAULT_TARGET = "C:\\Windows\\System32\\notepad.exe"

_LOGO = r"""
    +========================================================+
    |                                                        |
    |       _          _   _    ____ _                _      |
    |      / \   _ __ | |_(_)  / ___| |__   ___  __ _| |_    |
    |     / _ \ | '_ \| __| | | |   | '_ \ / _ \/ _` | __|   |
    |    / ___ \| | | | |_| | | |___| | | |  __/ (_| | |_    |
    |   /_/   \_\_| |_|\__|_|  \____|_| |_|\___|\__,_|\__|   |
    |                                                        |
    +========================================================+
    """


def print_logo(stream: TextIO | None = None) -> None:
    """Write the banner to ``stream`` (standard output by default)."""
    logger.debug("print_logo")
    out = stream if stream is not None else sys.stdout
    out.write(_LOGO + "\n")
    out.flush()


def main_loop(target_path: str = DEFAULT_TARGET) -> None:
    """Launch the target and terminate it again if it is still running."""
    logger.debug("main_loop")
    controller = ProcessController(target_path)
    controller.launch()
    logger.info("Target '%s' launched", target_path)

    if controller.is_running():
        controller.terminate()
    logger.info("Target '%s' terminated", target_path)


def run(target_path: str = DEFAULT_TARGET, stream: TextIO | None = None) -> None:
    """Show the banner and run the main loop."""
    logger.debug("run")
    print_logo(stream)
    main_loop(target_path)