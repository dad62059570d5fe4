#!/usr/bin/env python3

"""Signature resolution: from a symbol spec to a single address.

Resolution starts at the first match of the symbol's pattern and then walks the
dereference chain. Each step adds a signed offset and replaces the address
with the little-endian 32-bit value stored there. Dereferences always read 4
bytes: the chains follow rel32 displacements and RVA table entries embedded in
machine code, not native pointers.
"""

import struct

from ....infrastructure.logging import get_logger
from ...errors import BadPatternError, PatternNotFoundError
from ...models.symbols import AddressMode, ResolvedAddress, SymbolSpec
from .pattern_compiler import PatternCompiler

logger = get_logger(__name__)

DEREF_WIDTH = 4
ADDRESS_MAX = (1 << 64) - 1
_U32 = struct.Struct("<I")


class SignatureResolver:
    """Resolves symbol specs against one binary buffer.

    Attributes:
        data: Raw contents of the binary, never modified
        image_base: Preferred load address of the image
    """

    def __init__(self, data: bytes, image_base: int):
        self.data = data
        self.image_base = image_base

    def resolve(self, spec: SymbolSpec) -> ResolvedAddress:
        """Compute the address of ``spec``.

        Args:
            spec: Symbol spec to resolve

        Returns:
            ResolvedAddress whose mode tells which section range table applies

        Raises:
            BadPatternError: Malformed pattern, out-of-range arithmetic or read
            PatternNotFoundError: The pattern does not occur in the binary
        """
        if spec.start_rva != 0:
            return ResolvedAddress(spec.start_rva + self.image_base, AddressMode.VIRTUAL)

        try:
            compiled = PatternCompiler.compile(spec.pattern)
        except BadPatternError as e:
            raise BadPatternError(spec.pattern, spec.name) from e
        address = compiled.find(self.data)
        if address is None:
            raise PatternNotFoundError(spec.name)

        logger.debug(f"{spec.name}: pattern matched at file offset 0x{address:x}")
        mode = AddressMode.RAW

        for offset in spec.offsets:
            address = self._peek_u32(self._add_signed(address, offset, spec), spec)
            mode = AddressMode.VIRTUAL

        address = self._add_signed(address, spec.extra, spec)

        if spec.rip_relative:
            displacement = self._peek_u32(address, spec)
            address = (address + displacement) & 0xFFFFFFFF
            address = self._add_signed(address, spec.rip_offset, spec)

        if spec.relative:
            address = self._add_signed(address, -self.image_base, spec)
            mode = AddressMode.VIRTUAL

        return ResolvedAddress(address, mode)

    @staticmethod
    def _add_signed(address: int, offset: int, spec: SymbolSpec) -> int:
        """Add a signed offset, failing instead of wrapping."""
        result = address + offset
        if not 0 <= result <= ADDRESS_MAX:
            raise BadPatternError(spec.pattern, spec.name)
        return result

    def _peek_u32(self, address: int, spec: SymbolSpec) -> int:
        """Read a little-endian u32 at ``address`` in the raw buffer."""
        if address + DEREF_WIDTH > len(self.data):
            raise BadPatternError(spec.pattern, spec.name)
        value: int = _U32.unpack_from(self.data, address)[0]
        return value
