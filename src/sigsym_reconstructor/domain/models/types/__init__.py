#!/usr/bin/env python3

"""Debug-info type models."""

from .calling_convention import CallingConvention
from .function_signature import FunctionSignature, NamedFunction
from .primitive_kind import PrimitiveKind
from .struct_layout import StructField, StructLayout
from .type_node import (
    ArrayType,
    FunctionType,
    PointerType,
    PrimitiveType,
    StructRef,
    TypeNode,
)

__all__ = [
    "ArrayType",
    "CallingConvention",
    "FunctionSignature",
    "FunctionType",
    "NamedFunction",
    "PointerType",
    "PrimitiveKind",
    "PrimitiveType",
    "StructField",
    "StructLayout",
    "StructRef",
    "TypeNode",
]
