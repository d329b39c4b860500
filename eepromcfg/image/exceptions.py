#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Boot EEPROM image exceptions.

Every failure detected while scanning or patching an image is fatal for the
operation in progress; none of them is retried or repaired.
"""

from typing import Optional

from eepromcfg.exceptions import EEPROMCorruptedException, EEPROMError, EEPROMLengthError


class WrongImageSize(EEPROMLengthError):
    """Image buffer does not have the fixed EEPROM image size."""


class CorruptImage(EEPROMCorruptedException):
    """Section header with an invalid magic number (or unreadable file name) found."""

    def __init__(self, desc: Optional[str] = None, offset: Optional[int] = None) -> None:
        """Initialize the exception.

        :param desc: Description of the corruption.
        :param offset: Offset of the offending section header.
        """
        super().__init__(desc)
        self.offset = offset


class ConfigNotFound(EEPROMError):
    """No file section with the requested name exists in the image."""

    def __init__(self, desc: Optional[str] = None, filename: Optional[str] = None) -> None:
        """Initialize the exception.

        :param desc: Description of the failure.
        :param filename: Name of the file section that was looked up.
        """
        super().__init__(desc)
        self.filename = filename


class ConfigTooLarge(EEPROMLengthError):
    """New file content exceeds both the reserved section size and the size ceiling."""


class ImageSizeExceeded(EEPROMLengthError):
    """New file content would run past the end of the image."""
