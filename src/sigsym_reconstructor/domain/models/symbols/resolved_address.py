#!/usr/bin/env python3

"""Resolved address model produced by the signature resolver."""

from dataclasses import dataclass
from enum import Enum


class AddressMode(Enum):
    """Which section range table an address must be classified against."""

    RAW = "raw"  # File offset into the binary buffer
    VIRTUAL = "virtual"  # Image-relative virtual address

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ResolvedAddress:
    """A numeric address plus its addressing mode."""

    address: int
    mode: AddressMode = AddressMode.RAW

    @property
    def is_virtual(self) -> bool:
        return self.mode is AddressMode.VIRTUAL
