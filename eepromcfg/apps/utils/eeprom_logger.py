#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Logging setup for the eepromcfg applications.

Colored console output and a rotating debug log file.
"""

import logging
import logging.config
import logging.handlers
import os
import platform
import sys
from datetime import datetime
from typing import Optional, TextIO

import colorama

from eepromcfg import (
    EEPROMCFG_DEBUG,
    EEPROMCFG_DEBUG_LOG_FILE,
    EEPROMCFG_DEBUG_LOGGING_DISABLED,
    EEPROMCFG_USER_CONFIG_DIR,
    __version__,
)
from eepromcfg.exceptions import EEPROMError
from eepromcfg.utils.misc import load_configuration

colorama.just_fix_windows_console()

LOGGING_CONFIG_NAME = "logging.yaml"


def load_logging_config() -> Optional[str]:
    """Apply logging.yaml from the user configuration folder, if present.

    :return: Path of the applied configuration file or None
    """
    config_file = os.path.join(EEPROMCFG_USER_CONFIG_DIR, LOGGING_CONFIG_NAME)
    if not os.path.isfile(config_file):
        return None
    try:
        logging.config.dictConfig(load_configuration(config_file))
    except (EEPROMError, ValueError, TypeError) as exc:
        logging.getLogger("eepromcfg").warning(f"Invalid logging config {config_file}: {exc}")
        return None
    return config_file


class ColoredFormatter(logging.Formatter):
    """Logging formatter coloring the records by their level.

    INFO records are printed plain, other levels carry the source location.
    """

    FORMAT = logging.BASIC_FORMAT
    FORMAT_LOCATION = FORMAT + " (%(filename)s:%(lineno)d)"
    COLORS = {
        logging.DEBUG: colorama.Fore.BLUE,
        logging.INFO: colorama.Style.BRIGHT,
        logging.WARNING: colorama.Fore.YELLOW,
        logging.ERROR: colorama.Fore.RED,
        logging.CRITICAL: colorama.Fore.RED + colorama.Style.BRIGHT,
    }

    def __init__(self, colored: bool = True) -> None:
        super().__init__()
        self.colored = colored

    def format(self, record: logging.LogRecord) -> str:
        fmt = self.FORMAT if record.levelno == logging.INFO else self.FORMAT_LOCATION
        if self.colored:
            fmt = self.COLORS.get(record.levelno, "") + fmt + colorama.Style.RESET_ALL
        return logging.Formatter(fmt).format(record)


def _add_debug_file_handler(target_logger: logging.Logger) -> None:
    """Attach the rotating debug log file to the logger, once."""
    log_file = os.path.abspath(EEPROMCFG_DEBUG_LOG_FILE)
    if any(getattr(h, "baseFilename", None) == log_file for h in target_logger.handlers):
        return
    try:
        os.makedirs(os.path.dirname(log_file), exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=1_000_000, backupCount=5, encoding="utf-8"
        )
    except OSError as exc:
        target_logger.warning(f"Failed to initialize debug logging: {exc}")
        return
    handler.setFormatter(ColoredFormatter(colored=False))
    handler.setLevel(logging.DEBUG)
    target_logger.addHandler(handler)
    target_logger.debug(
        f"eepromcfg {__version__} started {datetime.now():%Y-%m-%d %H:%M:%S} "
        f"(Python {platform.python_version()}, {platform.platform()}), command: {sys.argv}"
    )


def install(
    level: Optional[int] = None,
    stream: TextIO = sys.stderr,
    colored: Optional[bool] = None,
    logger: Optional[logging.Logger] = None,
    create_debug_logger: bool = True,
) -> None:
    """Install eepromcfg log handler for colored output.

    :param level: logging level, defaults to logging.WARNING (DEBUG if EEPROMCFG_DEBUG is set)
    :param stream: stream to output logging, defaults to sys.stderr
    :param colored: colored output, by default only on a terminal without NO_COLOR set
    :param logger: defaults to the "eepromcfg" logger
    :param create_debug_logger: create the debug log file handler
    """
    load_logging_config()
    if not level:
        level = logging.DEBUG if EEPROMCFG_DEBUG else logging.WARNING
    if colored is None:
        # https://no-color.org/
        colored = "NO_COLOR" not in os.environ and hasattr(stream, "isatty") and stream.isatty()

    target_logger = logger or logging.getLogger("eepromcfg")
    target_logger.setLevel(logging.DEBUG)
    target_logger.propagate = True

    # one console handler only, repeated installs replace it
    for old_handler in list(target_logger.handlers):
        if type(old_handler) is logging.StreamHandler:  # pylint: disable=unidiomatic-typecheck
            target_logger.removeHandler(old_handler)

    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(ColoredFormatter(colored))
    target_logger.addHandler(handler)

    if create_debug_logger and not EEPROMCFG_DEBUG_LOGGING_DISABLED:
        _add_debug_file_handler(target_logger)
