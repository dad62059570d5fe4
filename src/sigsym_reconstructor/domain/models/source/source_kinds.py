#!/usr/bin/env python3

"""Kind tags exposed by the C source declaration tree.

Member names follow the libclang spellings so front-end adapters can map
their native kinds by name.
"""

from enum import Enum, IntEnum


class SourceTypeKind(Enum):
    """Type kinds reported by the front end."""

    VOID = "void"
    BOOL = "bool"
    CHAR_U = "char_u"
    UCHAR = "uchar"
    CHAR16 = "char16"
    CHAR32 = "char32"
    USHORT = "ushort"
    UINT = "uint"
    ULONG = "ulong"
    ULONGLONG = "ulonglong"
    UINT128 = "uint128"
    CHAR_S = "char_s"
    SCHAR = "schar"
    WCHAR = "wchar"
    SHORT = "short"
    INT = "int"
    LONG = "long"
    LONGLONG = "longlong"
    INT128 = "int128"
    HALF = "half"
    FLOAT16 = "float16"
    FLOAT = "float"
    DOUBLE = "double"
    LONGDOUBLE = "longdouble"
    FLOAT128 = "float128"

    TYPEDEF = "typedef"
    ELABORATED = "elaborated"
    CONSTANTARRAY = "constantarray"
    FUNCTIONPROTO = "functionproto"
    POINTER = "pointer"
    RECORD = "record"

    OTHER = "other"  # Anything the translator has no rule for

    @classmethod
    def from_name(cls, name: str) -> "SourceTypeKind":
        """Map a front-end kind name onto a member, falling back to OTHER."""
        return cls.__members__.get(name.upper(), cls.OTHER)


class SourceCallingConvention(IntEnum):
    """Calling conventions as numbered by libclang (``CXCallingConv``)."""

    DEFAULT = 0
    C = 1
    X86_STDCALL = 2
    X86_FASTCALL = 3
    X86_THISCALL = 4
    X86_PASCAL = 5
    AAPCS = 6
    AAPCS_VFP = 7
    X86_REGCALL = 8
    INTEL_OCL_BICC = 9
    WIN64 = 10
    X86_64_SYSV = 11
    X86_VECTORCALL = 12
    SWIFT = 13
    PRESERVE_MOST = 14
    PRESERVE_ALL = 15
    AARCH64_VECTORCALL = 16
    SWIFT_ASYNC = 17
    AARCH64_SVEPCS = 18
    M68K_RTD = 19
    INVALID = 100
    UNEXPOSED = 200


class DeclarationKind(Enum):
    """Top-level declaration kinds the reconstructor consumes."""

    FUNCTION = "function"
    STRUCT = "struct"
    VARIABLE = "variable"
    OTHER = "other"


class DiagnosticSeverity(IntEnum):
    """Front-end diagnostic severities, ordered."""

    IGNORED = 0
    NOTE = 1
    WARNING = 2
    ERROR = 3
    FATAL = 4
