#!/usr/bin/env python3

"""Pattern matching services."""

from .pattern_compiler import CompiledPattern, PatternCompiler
from .signature_resolver import SignatureResolver

__all__ = [
    "CompiledPattern",
    "PatternCompiler",
    "SignatureResolver",
]
