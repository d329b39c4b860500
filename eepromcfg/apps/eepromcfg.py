#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Boot EEPROM configuration tool."""
import logging
import sys
from typing import Optional

import click
import prettytable

from eepromcfg.apps.utils import eeprom_logger
from eepromcfg.apps.utils.common_cli_options import (
    eepromcfg_apps_common_options,
    eepromcfg_image_argument,
    eepromcfg_output_option,
)
from eepromcfg.apps.utils.utils import catch_eeprom_error, read_input, write_output
from eepromcfg.image.eeprom import EepromImage
from eepromcfg.image.sections import DEFAULT_FILENAME

logger = logging.getLogger(__name__)


@click.group(name="eepromcfg", no_args_is_help=True)
@eepromcfg_apps_common_options
def main(log_level: int) -> None:
    """Boot EEPROM configuration tool.

    Read or replace the configuration file embedded in a boot EEPROM image.
    """
    eeprom_logger.install(level=log_level)


@main.command(name="config", no_args_is_help=True)
@eepromcfg_image_argument
@click.option(
    "-c",
    "--config",
    type=click.Path(exists=True, dir_okay=False, allow_dash=True),
    help="""\b
        Path to the new configuration file, '-' reads it from the standard input.
        When used, the updated EEPROM image is written to the output.
        When omitted, the current configuration is written to the output.""",
)
@click.option(
    "-n",
    "--name",
    "filename",
    default=DEFAULT_FILENAME,
    show_default=True,
    help="Name of the file section to read or replace.",
)
@eepromcfg_output_option()
def eeprom_config(
    eeprom: str, config: Optional[str], filename: str, output: Optional[str]
) -> None:
    """Extract or update the configuration of an EEPROM image.

    \b
    EEPROM  - path to the boot EEPROM image file.
    """
    image = EepromImage.load(eeprom)
    if config is None:
        write_output(image.read_config(filename), output)
        return
    image.write_config(read_input(config), filename)
    write_output(image.export(), output)


@main.command(name="sections", no_args_is_help=True)
@eepromcfg_image_argument
def eeprom_sections(eeprom: str) -> None:
    """List all sections of an EEPROM image.

    \b
    EEPROM  - path to the boot EEPROM image file.
    """
    image = EepromImage.load(eeprom)
    table = prettytable.PrettyTable(["Offset", "Magic", "Length", "File"])
    table.align = "l"
    for header in image.sections():
        table.add_row(
            [
                f"0x{header.offset:08X}",
                f"0x{header.magic:08X}",
                header.length,
                image.file_name(header) if header.is_file else "",
            ]
        )
    click.echo(table)


@catch_eeprom_error
def safe_main() -> None:
    """Call the main function."""
    sys.exit(main())  # pylint: disable=no-value-for-parameter


if __name__ == "__main__":
    safe_main()
