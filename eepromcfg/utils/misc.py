#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Miscellaneous utilities.

Alignment of section offsets, image file loading and storing and loading of
the YAML/JSON configuration files.
"""

import logging
import os
from typing import Union

import yaml

from eepromcfg.exceptions import EEPROMIOError, EEPROMParsingError, EEPROMValueError

logger = logging.getLogger(__name__)


def align(number: int, alignment: int = 4) -> int:
    """Align number to specified byte boundary.

    :param number: The number to be aligned (size or address).
    :param alignment: The boundary alignment value, typically a power of 2 (4, 8, 16).
    :return: Aligned number, always greater than or equal to the input number.
    :raises EEPROMValueError: When alignment is non-positive or number is negative.
    """
    if alignment <= 0 or number < 0:
        raise EEPROMValueError("Wrong alignment")

    return (number + (alignment - 1)) // alignment * alignment


def load_binary(path: str) -> bytes:
    """Load binary file into bytes.

    :param path: Path to the binary file to load.
    :return: Content of the binary file as bytes.
    :raises EEPROMIOError: The file doesn't exist.
    """
    if not os.path.isfile(path):
        raise EEPROMIOError(f"File '{path}' not found")
    logger.debug(f"Loading binary file from {path}")
    with open(path, "rb") as f:
        return f.read()


def write_file(
    data: Union[str, bytes],
    path: str,
    mode: str = "w",
    encoding: str = "utf-8",
) -> int:
    """Write data to a file, creating the parent directories when needed.

    A failure in the middle of the write leaves a partially written file behind.

    :param data: Data to write to the file.
    :param path: Path to the target file.
    :param mode: File writing mode ('w' for text, 'wb' for binary), defaults to 'w'.
    :param encoding: Text encoding, defaults to 'utf-8'.
    :return: Number of characters or bytes written to the file.
    """
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)

    logger.debug(f"Storing {'binary' if 'b' in mode else 'text'} file at {path}")
    with open(path, mode, encoding=None if "b" in mode else encoding) as f:
        return f.write(data)


def load_configuration(path: str) -> dict:
    """Load configuration from YAML (or JSON, being a subset of YAML) file.

    :param path: Path to configuration file.
    :raises EEPROMParsingError: When file cannot be read, parsed, or is not a mapping.
    :return: Content of configuration as dictionary.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        raise EEPROMParsingError(f"Can't load configuration file {path}: {exc}") from exc

    if not isinstance(config_data, dict) or not config_data:
        raise EEPROMParsingError(f"Invalid configuration file: {path}")
    return config_data
