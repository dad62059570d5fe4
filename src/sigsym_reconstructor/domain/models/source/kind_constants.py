#!/usr/bin/env python3

"""Source kind classification tables.

These tables drive the type translator: which source kinds are primitives
(and which debug-info primitive they become), which are transparent aliases,
and which calling conventions survive into a function signature.
"""

from ..types import CallingConvention, PrimitiveKind
from .source_kinds import SourceCallingConvention, SourceTypeKind

# Fixed-width kinds with a one-to-one primitive counterpart
PRIMITIVE_KINDS: dict[SourceTypeKind, PrimitiveKind] = {
    SourceTypeKind.VOID: PrimitiveKind.VOID,
    SourceTypeKind.BOOL: PrimitiveKind.BOOLEAN8,
    SourceTypeKind.CHAR_S: PrimitiveKind.SIGNED_CHARACTER,
    SourceTypeKind.CHAR_U: PrimitiveKind.UNSIGNED_CHARACTER,
    SourceTypeKind.SCHAR: PrimitiveKind.SIGNED_CHARACTER,
    SourceTypeKind.UCHAR: PrimitiveKind.UNSIGNED_CHARACTER,
    SourceTypeKind.WCHAR: PrimitiveKind.WIDE_CHARACTER,
    SourceTypeKind.CHAR16: PrimitiveKind.CHARACTER16,
    SourceTypeKind.CHAR32: PrimitiveKind.CHARACTER32,
    SourceTypeKind.SHORT: PrimitiveKind.INT16_SHORT,
    SourceTypeKind.USHORT: PrimitiveKind.UINT16_SHORT,
    SourceTypeKind.INT: PrimitiveKind.INT32,
    SourceTypeKind.UINT: PrimitiveKind.UINT32,
    SourceTypeKind.LONG: PrimitiveKind.INT32_LONG,
    SourceTypeKind.ULONG: PrimitiveKind.UINT32_LONG,
    SourceTypeKind.LONGLONG: PrimitiveKind.INT64_QUAD,
    SourceTypeKind.ULONGLONG: PrimitiveKind.UINT64_QUAD,
    SourceTypeKind.INT128: PrimitiveKind.INT128,
    SourceTypeKind.UINT128: PrimitiveKind.UINT128,
    SourceTypeKind.HALF: PrimitiveKind.FLOAT16,
    SourceTypeKind.FLOAT16: PrimitiveKind.FLOAT16,
    SourceTypeKind.FLOAT: PrimitiveKind.FLOAT32,
    SourceTypeKind.DOUBLE: PrimitiveKind.FLOAT64,
    SourceTypeKind.LONGDOUBLE: PrimitiveKind.FLOAT80,
    SourceTypeKind.FLOAT128: PrimitiveKind.FLOAT128,
}

# Kinds that are just another spelling of their canonical type
ALIAS_KINDS = frozenset(
    {
        SourceTypeKind.TYPEDEF,  # typedef int s32;
        SourceTypeKind.ELABORATED,  # struct Foo (newer libclang)
    }
)

# Conventions that map onto a debug-info calling convention.
# Both 64-bit platform defaults (Win64, System V) are recorded as near-fast.
CALLING_CONVENTIONS: dict[SourceCallingConvention, CallingConvention] = {
    SourceCallingConvention.C: CallingConvention.NEAR_C,
    SourceCallingConvention.X86_FASTCALL: CallingConvention.NEAR_FAST,
    SourceCallingConvention.X86_STDCALL: CallingConvention.NEAR_STDCALL,
    SourceCallingConvention.X86_THISCALL: CallingConvention.THIS_CALL,
    SourceCallingConvention.WIN64: CallingConvention.NEAR_FAST,
    SourceCallingConvention.X86_64_SYSV: CallingConvention.NEAR_FAST,
}
