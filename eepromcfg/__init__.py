#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""eepromcfg - boot EEPROM configuration editor.

Reads and replaces the configuration file embedded in a fixed-size boot EEPROM
image while keeping the rest of the image layout intact.

Available as a Python library and as the `eepromcfg` command line tool.
"""

import os
from typing import Optional, Union

from packaging.version import Version, parse
from platformdirs import PlatformDirs

from .__version__ import __version__ as _raw_version


def get_eepromcfg_version() -> Version:
    """Get eepromcfg version information.

    :return: Parsed version object.
    """
    return parse(_raw_version)


def value_to_bool(value: Optional[Union[bool, int, str]]) -> bool:
    """Convert value to boolean from various input formats.

    Supports conversion from string representations like "True", "true", "T", "1"
    and standard Python truthy/falsy values for other types.

    :param value: Value to convert to boolean (string, int, bool, or None).
    :return: Boolean representation of the input value.
    """
    if isinstance(value, str):
        return value in ("True", "true", "T", "1")
    return bool(value)


version = get_eepromcfg_version()

__author__ = "NXP"
__license__ = "BSD-3-Clause"
__version__ = str(version)

EEPROMCFG_VERSION_BASE = version.base_version

EEPROMCFG_PLATFORM_DIRS = PlatformDirs(
    appauthor="nxp",
    appname="eepromcfg",
    version=EEPROMCFG_VERSION_BASE,
)

EEPROMCFG_DEBUG = value_to_bool(os.environ.get("EEPROMCFG_DEBUG"))

EEPROMCFG_DEBUG_LOGGING_DISABLED = value_to_bool(
    os.environ.get("EEPROMCFG_DEBUG_LOGGING_DISABLED")
)
EEPROMCFG_DEBUG_LOG_FILE = os.environ.get(
    "EEPROMCFG_DEBUG_LOG_FILE",
    os.path.join(EEPROMCFG_PLATFORM_DIRS.user_log_dir, "debug.log"),
)

# user folder searched for logging.yaml
EEPROMCFG_USER_CONFIG_DIR = os.path.expanduser("~/.eepromcfg")
