#!/usr/bin/env python3

"""Section range model for the binary's section table."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SectionRange:
    """One section of the binary container.

    Both ranges are half-open: ``start <= address < end``.

    Attributes:
        index: 1-based section index as understood by the debug-info writer
        virtual_start: Image-relative start of the section in memory
        virtual_end: Image-relative end of the section in memory
        raw_start: File offset of the section's data
        raw_end: File offset one past the section's data
        name: Section name, for diagnostics only
    """

    index: int
    virtual_start: int
    virtual_end: int
    raw_start: int
    raw_end: int
    name: str = ""

    @property
    def virtual_range(self) -> range:
        return range(self.virtual_start, self.virtual_end)

    @property
    def raw_range(self) -> range:
        return range(self.raw_start, self.raw_end)
