#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Logging Setup
================================================================================

Project:        Week 2 Project 1: Potts Hotspot Canvas
Module:         logger_setup.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 29, 2026
Last Updated:   January 29, 2026

License:        MIT License
================================================================================

Configures the dedicated "potts_canvas" logger. Module loggers
(potts_canvas.simulation, potts_canvas.hotspots, ...) propagate to it; it
does not propagate to the root logger, which keeps Numba's own logging out
of the simulation log.
"""

import logging
from pathlib import Path
from typing import Optional, Union


LOGGER_NAME = "potts_canvas"
DEFAULT_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def setup_logging(
    level: Union[int, str] = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    fmt: str = DEFAULT_FORMAT
) -> logging.Logger:
    """
    Configure console (and optionally file) logging for the package.

    Calling it again replaces the previous handlers.

    Args:
        level: Logging level name or number
        log_file: Optional path of a log file; parent directories are created
        fmt: Log record format

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(fmt)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized at level %s", logging.getLevelName(logger.level))
    return logger
