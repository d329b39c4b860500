#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Helpers building boot EEPROM images for tests."""

from struct import pack

from eepromcfg.image.sections import FILE_MAGIC, FILENAME_LEN, IMAGE_SIZE, MAGIC_MASK
from eepromcfg.utils.misc import align

# erased flash, a header of 0xFF bytes is valid and ends the section walk
ERASED = 0xFF


def raw_section(body: bytes, magic: int = MAGIC_MASK, padding: int = 0) -> bytes:
    """Build a section with given body, padded to 8 bytes.

    :param body: Section data behind the header.
    :param magic: Section magic number.
    :param padding: Padding byte value.
    :return: Section bytes.
    """
    data = pack(">LL", magic, len(body)) + body
    return data + bytes([padding]) * (align(len(data), 8) - len(data))


def file_section(name: str, payload: bytes) -> bytes:
    """Build a FILE_MAGIC section.

    :param name: File name, padded with NUL bytes to the name field size.
    :param payload: File content.
    :return: Section bytes.
    """
    body = name.encode("utf-8").ljust(FILENAME_LEN, b"\x00") + payload
    return raw_section(body, magic=FILE_MAGIC)


def build_image(*sections: bytes, fill: int = ERASED) -> bytearray:
    """Build an EEPROM image from sections placed one after another.

    :param sections: Section bytes.
    :param fill: Byte value filling the rest of the image.
    :return: Image data of IMAGE_SIZE bytes.
    """
    data = b"".join(sections)
    assert len(data) <= IMAGE_SIZE
    return bytearray(data + bytes([fill]) * (IMAGE_SIZE - len(data)))
