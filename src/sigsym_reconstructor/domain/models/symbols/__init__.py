#!/usr/bin/env python3

"""Symbol location domain models."""

from .resolved_address import AddressMode, ResolvedAddress
from .resolved_symbol import ResolvedSymbol
from .section_range import SectionRange
from .symbol_configuration import SymbolConfiguration
from .symbol_spec import SymbolSpec

__all__ = [
    "AddressMode",
    "ResolvedAddress",
    "ResolvedSymbol",
    "SectionRange",
    "SymbolConfiguration",
    "SymbolSpec",
]
