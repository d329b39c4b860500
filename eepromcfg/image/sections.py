#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Boot EEPROM image sections.

The image is a sequence of self-describing sections. Each section starts with
a big-endian header of two 32-bit words, a magic number and a length; the next
section header follows the section data on an 8-byte boundary.

File sections (FILE_MAGIC) carry a named file:

    +--------+--------+----------------+------------------------+
    | magic  | length | name (12 B)    | content                |
    +--------+--------+----------------+------------------------+
    0        4        8                20                20 + length - 12
"""

import logging
from dataclasses import dataclass
from struct import calcsize, unpack_from
from typing import ClassVar, Iterator, Union

from eepromcfg.image.exceptions import CorruptImage, WrongImageSize
from eepromcfg.utils.misc import align

logger = logging.getLogger(__name__)

IMAGE_SIZE = 512 * 1024
# any section header satisfies (magic & MAGIC_MASK) == MAGIC_MASK
MAGIC_MASK = 0x55AAF00F
# id for modifiable file
FILE_MAGIC = 0x55AAF11F
FILE_HDR_LEN = 20
FILENAME_LEN = 12
SECTION_ALIGNMENT = 8

DEFAULT_FILENAME = "bootconf.txt"


def check_image_size(data: Union[bytes, bytearray]) -> None:
    """Check that the buffer has exactly the EEPROM image size.

    :param data: Image data.
    :raises WrongImageSize: The size of data is not IMAGE_SIZE.
    """
    if len(data) != IMAGE_SIZE:
        raise WrongImageSize(
            f"Invalid EEPROM image size: {len(data)} bytes, expected {IMAGE_SIZE} bytes"
        )


@dataclass(frozen=True)
class SectionHeader:
    """Header of one image section."""

    FORMAT: ClassVar[str] = ">LL"
    SIZE: ClassVar[int] = calcsize(FORMAT)

    offset: int
    magic: int
    length: int

    @property
    def is_file(self) -> bool:
        """The section carries a named, modifiable file."""
        return self.magic == FILE_MAGIC

    @property
    def end(self) -> int:
        """Offset of the first byte behind the section data (without padding)."""
        return self.offset + self.SIZE + self.length

    @property
    def next_offset(self) -> int:
        """Offset of the following section header."""
        return align(self.end, SECTION_ALIGNMENT)

    def __str__(self) -> str:
        return (
            f"Section <OFFSET:0x{self.offset:08X}, MAGIC:0x{self.magic:08X}, LEN:{self.length}B>"
        )

    @classmethod
    def parse(cls, data: Union[bytes, bytearray], offset: int = 0) -> "SectionHeader":
        """Parse section header.

        :param data: Image data
        :param offset: Offset of the header in the data
        :return: SectionHeader object
        :raises CorruptImage: The magic number does not match the section magic mask
        """
        magic, length = unpack_from(cls.FORMAT, data, offset)
        if (magic & MAGIC_MASK) != MAGIC_MASK:
            raise CorruptImage(
                f"EEPROM is corrupted: invalid section magic 0x{magic:08X} at offset 0x{offset:08X}",
                offset=offset,
            )
        return cls(offset=offset, magic=magic, length=length)


def scan_sections(data: Union[bytes, bytearray]) -> Iterator[SectionHeader]:
    """Walk all section headers of the image.

    The iteration is lazy; calling the function again starts a new walk from offset 0.
    The walk stops when the next header offset reaches the end of the image.

    :param data: Image data of IMAGE_SIZE bytes
    :return: Iterator of section headers
    :raises WrongImageSize: The image size is not IMAGE_SIZE
    :raises CorruptImage: A section header with invalid magic number was found
    """
    check_image_size(data)
    offset = 0
    while offset < IMAGE_SIZE:
        header = SectionHeader.parse(data, offset)
        logger.debug(str(header))
        yield header
        offset = header.next_offset


def file_name(data: Union[bytes, bytearray], header: SectionHeader) -> str:
    """Get name of the file stored in a file section.

    :param data: Image data
    :param header: Header of a FILE_MAGIC section
    :return: File name without trailing NUL padding
    :raises CorruptImage: The name field is not valid UTF-8
    """
    raw_name = bytes(data[header.offset + SectionHeader.SIZE : header.offset + FILE_HDR_LEN])
    try:
        return raw_name.rstrip(b"\x00").decode("utf-8")
    except UnicodeDecodeError as exc:
        raise CorruptImage(
            f"EEPROM is corrupted: invalid file name {raw_name.hex()} at offset 0x{header.offset:08X}",
            offset=header.offset,
        ) from exc
