#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""CLI helper for Click."""

import logging
from typing import Any, Callable, Optional, TypeVar, Union

import click

from eepromcfg import __version__ as eepromcfg_version

FC = TypeVar("FC", bound=Union[Callable[..., Any], click.Command])


def eepromcfg_apps_common_options(options: FC) -> FC:
    """Common click options.

    Sets --help, --version; provides: `log_level: int` for logging.

    :return: click decorator
    """
    options = click.help_option("--help")(options)
    options = click.version_option(eepromcfg_version, "--version")(options)
    options = click.option(
        "-vv",
        "--debug",
        "log_level",
        flag_value=logging.DEBUG,
        help="Display more debugging information.",
    )(options)
    options = click.option(
        "-v",
        "--verbose",
        "log_level",
        flag_value=logging.INFO,
        help="Print more detailed information",
    )(options)
    return options


def eepromcfg_image_argument(options: FC) -> FC:
    """Click decorator for the input EEPROM image.

    Provides: `eeprom: str` a full path to the image file.

    :return: click decorator
    """
    return click.argument(
        "eeprom",
        metavar="EEPROM",
        type=click.Path(exists=True, dir_okay=False, resolve_path=True),
    )(options)


def eepromcfg_output_option(
    required: bool = False,
    help: Optional[str] = None,  # pylint: disable=redefined-builtin
) -> Callable:
    """Click decorator handling on output file.

    Provides: `output: str` a full path to the output file.

    :param required: Output option is required, defaults to False
    :param help: Customized help message, defaults to None
    :return: Click decorator
    """

    def decorator(func: Callable[[FC], FC]) -> Callable[[FC], FC]:
        func = click.option(
            "-o",
            "--out",
            "output",
            type=click.Path(resolve_path=True, dir_okay=False),
            required=required,
            help=help or "Path to a file, where to store the output. Standard output if omitted.",
        )(func)
        return func

    return decorator
