#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Boot EEPROM image handling.

Section scanning, lookup of named file sections and in-place replacement of
their content.
"""

from eepromcfg.image.eeprom import EepromImage, locate, read_config, write_config
from eepromcfg.image.exceptions import (
    ConfigNotFound,
    ConfigTooLarge,
    CorruptImage,
    ImageSizeExceeded,
    WrongImageSize,
)
from eepromcfg.image.sections import (
    DEFAULT_FILENAME,
    FILE_HDR_LEN,
    FILE_MAGIC,
    FILENAME_LEN,
    IMAGE_SIZE,
    MAGIC_MASK,
    SectionHeader,
    scan_sections,
)

__all__ = [
    "ConfigNotFound",
    "ConfigTooLarge",
    "CorruptImage",
    "DEFAULT_FILENAME",
    "EepromImage",
    "FILE_HDR_LEN",
    "FILE_MAGIC",
    "FILENAME_LEN",
    "IMAGE_SIZE",
    "ImageSizeExceeded",
    "MAGIC_MASK",
    "SectionHeader",
    "WrongImageSize",
    "locate",
    "read_config",
    "scan_sections",
    "write_config",
]
