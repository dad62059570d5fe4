#!/usr/bin/env python3

"""Struct layout models."""

from dataclasses import dataclass
from typing import Any

from .type_node import TypeNode


@dataclass(frozen=True)
class StructField:
    """One struct member; ``offset`` is in bytes from the start of the struct."""

    name: str
    type: TypeNode
    offset: int

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "type": self.type.to_dict(), "offset": self.offset}


@dataclass(frozen=True)
class StructLayout:
    """Name, ordered fields and total byte size of a struct."""

    name: str
    fields: tuple[StructField, ...]
    size: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "size": self.size,
            "fields": [field.to_dict() for field in self.fields],
        }
