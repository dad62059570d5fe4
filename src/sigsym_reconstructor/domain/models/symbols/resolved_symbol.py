#!/usr/bin/env python3

"""Resolved symbol model handed to the debug-info writer."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..types import TypeNode


@dataclass(frozen=True)
class ResolvedSymbol:
    """A symbol located inside a section of the binary."""

    name: str
    section_index: int
    offset: int
    type_ref: "TypeNode | int | None" = None  # TypeNode for globals, type index for functions
