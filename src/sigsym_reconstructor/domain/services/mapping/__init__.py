#!/usr/bin/env python3

"""Address mapping services."""

from .section_mapper import SectionMapper, SectionOffset
from .symbol_finder import SymbolFinder, SymbolSearchResult

__all__ = [
    "SectionMapper",
    "SectionOffset",
    "SymbolFinder",
    "SymbolSearchResult",
]
