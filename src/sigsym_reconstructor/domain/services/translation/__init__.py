#!/usr/bin/env python3

"""Translation of source declarations into debug-info types."""

from .function_builder import FunctionSignatureBuilder
from .struct_builder import StructLayoutBuilder
from .type_translator import TypeTranslator

__all__ = [
    "FunctionSignatureBuilder",
    "StructLayoutBuilder",
    "TypeTranslator",
]
