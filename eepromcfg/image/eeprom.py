#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Boot EEPROM image configuration editor.

This module locates a named file section (by default the bootloader
configuration `bootconf.txt`) in a boot EEPROM image, extracts its content and
replaces it in place without moving any other section of the image.
"""

import logging
from struct import pack_into
from typing import Iterator, Union

import hexdump
from typing_extensions import Self

from eepromcfg.exceptions import EEPROMValueError
from eepromcfg.image.exceptions import ConfigNotFound, ConfigTooLarge, ImageSizeExceeded
from eepromcfg.image.sections import (
    DEFAULT_FILENAME,
    FILE_HDR_LEN,
    FILENAME_LEN,
    IMAGE_SIZE,
    SectionHeader,
    check_image_size,
    file_name,
    scan_sections,
)
from eepromcfg.utils.abstract import BaseClass
from eepromcfg.utils.misc import load_binary

logger = logging.getLogger(__name__)

# size of the length word, counted in the encoded size of a new file
LENGTH_FIELD_LEN = 4
# the encoded size may always grow up to this limit
MAX_FILE_SIZE = 1024


def locate(data: Union[bytes, bytearray], filename: str = DEFAULT_FILENAME) -> tuple[int, int]:
    """Find the file section with given name.

    The first matching section wins.

    :param data: Image data
    :param filename: Name of the file to look for
    :return: Tuple of section offset and section length
    :raises WrongImageSize: The image size is not IMAGE_SIZE
    :raises CorruptImage: A corrupted section header was found before the file
    :raises ConfigNotFound: No file section with given name exists
    """
    for header in scan_sections(data):
        if header.is_file and file_name(data, header) == filename:
            logger.info(f"Found '{filename}' at offset 0x{header.offset:08X}, length {header.length}")
            return header.offset, header.length
    raise ConfigNotFound(f"'{filename}' not found in the EEPROM image", filename=filename)


def read_config(data: Union[bytes, bytearray], offset: int, length: int) -> bytes:
    """Extract the content of a file section.

    :param data: Image data
    :param offset: Offset of the file section
    :param length: Length of the file section as stored in its header
    :return: File content
    :raises WrongImageSize: The image size is not IMAGE_SIZE
    """
    check_image_size(data)
    start = offset + FILE_HDR_LEN
    return bytes(data[start : start + length - FILENAME_LEN])


def write_config(data: bytearray, offset: int, length: int, payload: bytes) -> bytearray:
    """Replace the content of a file section in place.

    Only the length word and the content bytes are overwritten. Bytes of the old
    content behind the end of a shorter new content are left untouched.

    :param data: Mutable image data
    :param offset: Offset of the file section
    :param length: Length of the file section as stored in its header
    :param payload: New file content
    :return: The updated image data (same object as data)
    :raises EEPROMValueError: The image data is not mutable or the content is not bytes
    :raises WrongImageSize: The image size is not IMAGE_SIZE
    :raises ConfigTooLarge: The new content doesn't fit into the section nor the size limit
    :raises ImageSizeExceeded: The new content would exceed the end of the image
    """
    if not isinstance(data, bytearray):
        raise EEPROMValueError(f"Image data must be a bytearray, got {type(data).__name__}")
    if not isinstance(payload, (bytes, bytearray)):
        raise EEPROMValueError(f"Config must be bytes, got {type(payload).__name__}")
    check_image_size(data)
    new_length = len(payload) + FILENAME_LEN
    encoded_size = new_length + LENGTH_FIELD_LEN
    if encoded_size > length and encoded_size > MAX_FILE_SIZE:
        raise ConfigTooLarge(
            f"Config is too large ({encoded_size} bytes). "
            f"The maximum size is {max(length, MAX_FILE_SIZE)} bytes."
        )
    if offset + FILE_HDR_LEN + len(payload) > IMAGE_SIZE:
        raise ImageSizeExceeded(
            f"EEPROM image size exceeded: {len(payload)} bytes at offset 0x{offset + FILE_HDR_LEN:08X}"
        )
    start = offset + FILE_HDR_LEN
    data[start : start + len(payload)] = payload
    pack_into(">L", data, offset + 4, new_length)
    logger.info(f"Updated file section at offset 0x{offset:08X}, new length {new_length}")
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"New content:\n{hexdump.hexdump(payload, result='return')}")
    return data


class EepromImage(BaseClass):
    """Boot EEPROM image.

    Owns a mutable copy of the image data of exactly IMAGE_SIZE bytes.
    """

    def __init__(self, data: Union[bytes, bytearray]) -> None:
        """Constructor.

        :param data: Image data, copied into the object
        :raises WrongImageSize: The image size is not IMAGE_SIZE
        """
        check_image_size(data)
        self._data = bytearray(data)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={len(self._data)})"

    def __str__(self) -> str:
        lines = [f"EEPROM image ({len(self._data)} bytes)"]
        lines.extend(f" {header}" for header in self.sections())
        return "\n".join(lines)

    @property
    def size(self) -> int:
        """Image size in bytes."""
        return len(self._data)

    @classmethod
    def parse(cls, data: bytes) -> Self:
        """Parse EEPROM image.

        :param data: Image data
        :return: EepromImage object
        :raises WrongImageSize: The image size is not IMAGE_SIZE
        """
        return cls(data)

    @classmethod
    def load(cls, path: str) -> Self:
        """Load EEPROM image from a file.

        :param path: Path to the image file
        :return: EepromImage object
        """
        return cls.parse(load_binary(path))

    def export(self) -> bytes:
        """Export the whole image.

        :return: Image data
        """
        return bytes(self._data)

    def sections(self) -> Iterator[SectionHeader]:
        """Iterate over all sections of the image."""
        return scan_sections(self._data)

    def file_name(self, header: SectionHeader) -> str:
        """Get name of the file stored in a file section.

        :param header: Header of a file section
        :return: File name
        """
        return file_name(self._data, header)

    def locate(self, filename: str = DEFAULT_FILENAME) -> tuple[int, int]:
        """Find the file section with given name.

        :param filename: Name of the file
        :return: Tuple of section offset and section length
        """
        return locate(self._data, filename)

    def read_config(self, filename: str = DEFAULT_FILENAME) -> bytes:
        """Get content of a file stored in the image.

        :param filename: Name of the file
        :return: File content
        """
        offset, length = self.locate(filename)
        return read_config(self._data, offset, length)

    def write_config(self, payload: bytes, filename: str = DEFAULT_FILENAME) -> None:
        """Replace content of a file stored in the image.

        :param payload: New file content
        :param filename: Name of the file
        """
        offset, length = self.locate(filename)
        write_config(self._data, offset, length, payload)
