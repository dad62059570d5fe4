#!/usr/bin/env python3

"""Primitive debug-info type kinds."""

from enum import Enum


class PrimitiveKind(Enum):
    """Fixed-width primitive types understood by debug-info consumers."""

    VOID = "void"
    BOOLEAN8 = "bool8"
    SIGNED_CHARACTER = "signed_char"
    UNSIGNED_CHARACTER = "unsigned_char"
    WIDE_CHARACTER = "wchar"
    CHARACTER16 = "char16"
    CHARACTER32 = "char32"
    INT16_SHORT = "short"
    UINT16_SHORT = "unsigned_short"
    INT32 = "int32"
    UINT32 = "uint32"
    INT32_LONG = "long"
    UINT32_LONG = "unsigned_long"
    INT64_QUAD = "int64"
    UINT64_QUAD = "uint64"
    INT128 = "int128"
    UINT128 = "uint128"
    FLOAT16 = "float16"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    FLOAT80 = "float80"
    FLOAT128 = "float128"

    def __str__(self) -> str:
        return self.value
