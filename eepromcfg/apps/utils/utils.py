#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Application utilities.

Error handling for command line entry points and output helpers.
"""

import logging
import sys
from functools import wraps
from typing import Any, Callable, Optional

import click

from eepromcfg import EEPROMCFG_DEBUG_LOG_FILE, EEPROMCFG_DEBUG_LOGGING_DISABLED
from eepromcfg.exceptions import EEPROMError
from eepromcfg.utils.misc import load_binary, write_file

logger = logging.getLogger(__name__)


def catch_eeprom_error(function: Callable) -> Callable:
    """Catch and handle EEPROMError and other exceptions.

    EEPROMError and AssertionError print the message and exit with code 2.
    Any other exception (including KeyboardInterrupt) exits with code 3.

    :param function: The function to be decorated.
    :return: The decorated function.
    """

    @wraps(function)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            retval = function(*args, **kwargs)
            return retval
        except (AssertionError, EEPROMError) as eeprom_exc:
            click.echo(f"{eeprom_exc.__class__.__name__}: {eeprom_exc}", err=True)
            logger.debug(str(eeprom_exc), exc_info=True)
            if not EEPROMCFG_DEBUG_LOGGING_DISABLED:
                click.secho(
                    f"See debug log file: {EEPROMCFG_DEBUG_LOG_FILE} for more info",
                    fg="yellow",
                    err=True,
                )
            sys.exit(2)
        except (Exception, KeyboardInterrupt) as base_exc:  # pylint: disable=broad-except
            click.echo(f"GENERAL ERROR: {type(base_exc).__name__}: {base_exc}", err=True)
            logger.debug(str(base_exc), exc_info=True)
            if not EEPROMCFG_DEBUG_LOGGING_DISABLED:
                click.secho(
                    f"See debug log file: {EEPROMCFG_DEBUG_LOG_FILE} for more info.",
                    fg="yellow",
                    err=True,
                )
            sys.exit(3)

    return wrapper


def write_output(data: bytes, output: Optional[str] = None) -> None:
    """Write binary data into the output file or to the standard output.

    :param data: Data to write
    :param output: Path to the output file, standard output is used if not set
    """
    if output:
        write_file(data, output, mode="wb")
        logger.info(f"Output stored into {output}")
        return
    stdout = click.get_binary_stream("stdout")
    stdout.write(data)
    stdout.flush()


def read_input(path: str) -> bytes:
    """Read binary input from a file, '-' reads the standard input.

    :param path: Path to the input file or '-'
    :return: Input data
    """
    if path == "-":
        return click.get_binary_stream("stdin").read()
    return load_binary(path)
