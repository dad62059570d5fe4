#!/usr/bin/env python3

"""Closed debug-info type model.

A ``TypeNode`` is exactly one of ``PrimitiveType``, ``PointerType``,
``ArrayType``, ``StructRef`` or ``FunctionType``. Structs are only ever
referenced by name, so no node can contain itself.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

from .primitive_kind import PrimitiveKind

if TYPE_CHECKING:
    from .function_signature import FunctionSignature


@dataclass(frozen=True)
class PrimitiveType:
    kind: PrimitiveKind

    def to_dict(self) -> dict[str, Any]:
        return {"kind": "primitive", "primitive": self.kind.value}


@dataclass(frozen=True)
class PointerType:
    target: "TypeNode"

    def to_dict(self) -> dict[str, Any]:
        return {"kind": "pointer", "target": self.target.to_dict()}


@dataclass(frozen=True)
class ArrayType:
    """Fixed-size array; ``size`` is the total size in bytes, not the element count."""

    element: "TypeNode"
    size: int

    def to_dict(self) -> dict[str, Any]:
        return {"kind": "array", "element": self.element.to_dict(), "size": self.size}


@dataclass(frozen=True)
class StructRef:
    """Name-only reference to a registered struct layout."""

    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"kind": "struct", "name": self.name}


@dataclass(frozen=True)
class FunctionType:
    signature: "FunctionSignature"

    def to_dict(self) -> dict[str, Any]:
        return {"kind": "function", "signature": self.signature.to_dict()}


TypeNode = Union[PrimitiveType, PointerType, ArrayType, StructRef, FunctionType]
