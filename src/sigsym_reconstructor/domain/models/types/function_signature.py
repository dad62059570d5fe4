#!/usr/bin/env python3

"""Function signature models."""

from dataclasses import dataclass
from typing import Any

from .calling_convention import CallingConvention
from .type_node import TypeNode


@dataclass(frozen=True)
class FunctionSignature:
    """Return type, ordered parameter types and calling convention."""

    return_type: TypeNode
    parameters: tuple[TypeNode, ...]
    calling_convention: CallingConvention

    def to_dict(self) -> dict[str, Any]:
        return {
            "return_type": self.return_type.to_dict(),
            "parameters": [param.to_dict() for param in self.parameters],
            "calling_convention": self.calling_convention.value,
        }


@dataclass(frozen=True)
class NamedFunction:
    """A function signature bound to the function's linkage name."""

    name: str
    signature: FunctionSignature
