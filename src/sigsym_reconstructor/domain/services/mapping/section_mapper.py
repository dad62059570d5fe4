#!/usr/bin/env python3

"""Classification of resolved addresses against the section table."""

from collections.abc import Sequence
from dataclasses import dataclass

from ...models.symbols import ResolvedAddress, SectionRange


@dataclass(frozen=True)
class SectionOffset:
    """A section-relative location."""

    offset: int
    section_index: int


class SectionMapper:
    """Maps addresses onto (offset, section index) pairs.

    Sections never overlap, so the first section containing the address is
    the only one.
    """

    @staticmethod
    def map_address(
        address: ResolvedAddress, sections: Sequence[SectionRange]
    ) -> SectionOffset | None:
        """Locate ``address`` inside ``sections``.

        Virtual addresses are checked against each section's virtual range,
        raw addresses against its file range. Ranges are half-open.

        Args:
            address: Address produced by the signature resolver
            sections: Section table in header order

        Returns:
            SectionOffset, or None if no section contains the address
        """
        for section in sections:
            bounds = section.virtual_range if address.is_virtual else section.raw_range
            if address.address in bounds:
                return SectionOffset(address.address - bounds.start, section.index)
        return None
