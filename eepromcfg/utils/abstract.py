#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Abstract base classes for binary data objects."""

from abc import ABC, abstractmethod
from typing import Any

from typing_extensions import Self


########################################################################################################################
# Abstract Class for Data Classes
########################################################################################################################
class RawBaseClass(ABC):
    """Base class with standardized equality comparison and string representation."""

    def __eq__(self, obj: Any) -> bool:
        """Check object equality.

        :param obj: Object to compare with this instance.
        :return: True if objects are instances of the same class with identical attributes.
        """
        return isinstance(obj, self.__class__) and vars(obj) == vars(self)

    def __ne__(self, obj: Any) -> bool:
        return not self.__eq__(obj)

    @abstractmethod
    def __repr__(self) -> str:
        """Get string representation of the object."""

    @abstractmethod
    def __str__(self) -> str:
        """Get object description in string format."""


class BaseClass(RawBaseClass):
    """Abstract base class for objects that are parsed from and exported to bytes."""

    @abstractmethod
    def export(self) -> bytes:
        """Export object into bytes array.

        :return: Object representation as bytes.
        """

    @classmethod
    @abstractmethod
    def parse(cls, data: bytes) -> Self:
        """Parse object from bytes array.

        :param data: Byte array containing the serialized object data.
        :return: Parsed object instance.
        """
