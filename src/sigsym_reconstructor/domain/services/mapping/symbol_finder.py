#!/usr/bin/env python3

"""Symbol finder: resolve and map a whole list of symbol specs.

Failures are isolated per symbol. A stale or malformed signature turns into a
warning in the returned result and never stops the remaining specs from
resolving.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from ....infrastructure.logging import get_logger
from ...errors import SymbolResolutionError, UnmappedAddressError
from ...models.symbols import ResolvedSymbol, SectionRange, SymbolSpec
from ..matching import SignatureResolver
from .section_mapper import SectionMapper

logger = get_logger(__name__)


@dataclass
class SymbolSearchResult:
    """Symbols that resolved, and warnings for those that did not.

    Both lists follow the order of the input specs.
    """

    symbols: list[ResolvedSymbol] = field(default_factory=list)
    warnings: list[SymbolResolutionError] = field(default_factory=list)


class SymbolFinder:
    """Locates symbol specs inside one binary image.

    Attributes:
        resolver: Signature resolver bound to the raw buffer and image base
        sections: Section table of the image
    """

    def __init__(self, data: bytes, image_base: int, sections: Sequence[SectionRange]):
        self.resolver = SignatureResolver(data, image_base)
        self.sections = tuple(sections)

    def find_symbol(self, spec: SymbolSpec) -> ResolvedSymbol:
        """Resolve and map a single spec.

        Raises:
            SymbolResolutionError: If the symbol cannot be resolved or mapped
        """
        address = self.resolver.resolve(spec)
        location = SectionMapper.map_address(address, self.sections)
        if location is None:
            raise UnmappedAddressError(spec.name, spec.pattern)

        logger.debug(
            f"{spec.name}: {address.mode} 0x{address.address:x} -> "
            f"section {location.section_index} + 0x{location.offset:x}"
        )
        return ResolvedSymbol(spec.name, location.section_index, location.offset)

    def find_symbols(self, specs: Iterable[SymbolSpec]) -> SymbolSearchResult:
        """Resolve every spec, collecting failures as warnings.

        Args:
            specs: Symbol specs in configuration order

        Returns:
            SymbolSearchResult with resolved symbols and per-symbol warnings
        """
        result = SymbolSearchResult()
        for spec in specs:
            try:
                result.symbols.append(self.find_symbol(spec))
            except SymbolResolutionError as e:
                result.warnings.append(e)
        return result
