#!/usr/bin/env python3

"""Byte-signature compilation.

A signature is a whitespace-separated list of tokens. Each token is either a
two-digit hex literal (``8B``, ``e8``) or a wildcard (``?`` / ``??``) that
matches any byte. Signatures compile to a bytes regex; literal bytes are
escaped so values such as ``2E`` (``.``) or ``0A`` (newline) match themselves.
"""

import re
import string
from dataclasses import dataclass

from ....infrastructure.logging import get_logger
from ...errors import BadPatternError

logger = get_logger(__name__)

WILDCARD_TOKENS = frozenset({"?", "??"})

_HEX_DIGITS = frozenset(string.hexdigits)


@dataclass(frozen=True)
class CompiledPattern:
    """A compiled signature ready to be searched for."""

    source: str
    regex: "re.Pattern[bytes]"

    def find(self, data: bytes) -> int | None:
        """Return the offset of the left-most match in ``data``, or None."""
        match = self.regex.search(data)
        return match.start() if match else None


class PatternCompiler:
    """Turns signature strings into byte matchers."""

    @staticmethod
    def compile_token(token: str, pattern: str) -> bytes:
        """Compile one token into its regex fragment.

        Args:
            token: A single signature token
            pattern: Full signature, reported on failure

        Returns:
            Regex fragment matching the token

        Raises:
            BadPatternError: If the token is neither a hex byte nor a wildcard
        """
        if token in WILDCARD_TOKENS:
            return b"."

        if len(token) != 2 or not set(token) <= _HEX_DIGITS:
            raise BadPatternError(pattern)

        return re.escape(bytes([int(token, 16)]))

    @staticmethod
    def compile(pattern: str) -> CompiledPattern:
        """Compile a whole signature.

        Args:
            pattern: Whitespace-separated signature string

        Returns:
            CompiledPattern matching the signature

        Raises:
            BadPatternError: If any token is malformed
        """
        fragments = [PatternCompiler.compile_token(token, pattern) for token in pattern.split()]
        logger.debug(f"Compiled pattern {pattern!r} ({len(fragments)} bytes)")
        return CompiledPattern(pattern, re.compile(b"".join(fragments), re.DOTALL))
