#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""eepromcfg exception classes.

Base hierarchy of the exceptions raised by the eepromcfg library. All of them
derive from EEPROMError so a caller can catch every library failure at once.
"""

from typing import Optional

#######################################################################
# # eepromcfg Exceptions
#######################################################################


class EEPROMError(Exception):
    """eepromcfg Base Exception.

    :cvar fmt: Default error message format template.
    """

    fmt = "{description}"

    def __init__(self, desc: Optional[str] = None) -> None:
        """Initialize the base exception.

        :param desc: Optional description of the exception.
        """
        super().__init__()
        self.description = desc

    def __str__(self) -> str:
        """Return string representation of the exception.

        :return: Formatted exception message, "Unknown Error" when no description is set.
        """
        return self.fmt.format(description=self.description or "Unknown Error")


class EEPROMValueError(EEPROMError, ValueError):
    """Invalid value passed to an eepromcfg operation."""


class EEPROMIOError(EEPROMError, IOError):
    """Input/output failure while loading or storing data."""


class EEPROMLengthError(EEPROMError, ValueError):
    """Data does not meet the length requirements of the container."""


class EEPROMParsingError(EEPROMError):
    """Binary data could not be parsed."""


class EEPROMCorruptedException(EEPROMError):
    """Structural corruption detected in binary data."""
