#!/usr/bin/env python3

"""JSON debug-info writer.

Collects struct layouts, function prototypes and resolved symbols in the
order they are inserted, then writes them as one JSON document. Function
symbols refer to their prototype by type index; globals carry their type
inline. Struct references inside types are by name and resolve against the
``structs`` list.
"""

import hashlib
import json
from pathlib import Path
from typing import Any

from ..domain.errors import DebugInfoWriteError
from ..domain.models.types import NamedFunction, StructLayout, TypeNode
from .logging import get_logger

logger = get_logger(__name__)

FORMAT_VERSION = "1.0"


class JsonDebugInfoWriter:
    """Accumulates debug-info records and serializes them to JSON."""

    def __init__(self, is_64: bool, image_base: int = 0):
        self.is_64 = is_64
        self.image_base = image_base
        self.structs: list[dict[str, Any]] = []
        self.function_types: list[dict[str, Any]] = []
        self.functions: list[dict[str, Any]] = []
        self.globals: list[dict[str, Any]] = []
        self._struct_names: set[str] = set()

    def insert_struct(self, layout: StructLayout) -> None:
        """Register a struct layout. Names must be unique."""
        if layout.name in self._struct_names:
            raise DebugInfoWriteError(f"Duplicate struct {layout.name!r}")
        self._struct_names.add(layout.name)
        self.structs.append(layout.to_dict())

    def insert_function_metadata(self, function: NamedFunction) -> int:
        """Register a function prototype.

        Returns:
            Type index to pass to insert_function()
        """
        self.function_types.append(
            {"name": function.name, "signature": function.signature.to_dict()}
        )
        return len(self.function_types) - 1

    def insert_function(
        self, section_index: int, offset: int, name: str, type_index: int | None
    ) -> None:
        if type_index is not None and not 0 <= type_index < len(self.function_types):
            raise DebugInfoWriteError(f"Unknown type index {type_index} for {name!r}")
        self.functions.append(
            {"name": name, "section": section_index, "offset": offset, "type_index": type_index}
        )

    def insert_global(
        self, name: str, section_index: int, offset: int, type_node: TypeNode | None
    ) -> None:
        self.globals.append(
            {
                "name": name,
                "section": section_index,
                "offset": offset,
                "type": type_node.to_dict() if type_node is not None else None,
            }
        )

    def to_document(self, binary_path: Path | None = None) -> dict[str, Any]:
        """Assemble the output document."""
        document: dict[str, Any] = {
            "version": FORMAT_VERSION,
            "machine": {"is_64": self.is_64, "image_base": self.image_base},
            "structs": self.structs,
            "function_types": self.function_types,
            "functions": self.functions,
            "globals": self.globals,
        }
        if binary_path is not None:
            document["binary"] = {
                "path": str(binary_path),
                "sha256": hashlib.sha256(binary_path.read_bytes()).hexdigest(),
            }
        return document

    def commit(self, binary_path: Path, output_path: Path) -> None:
        """Write the debug-info document.

        Args:
            binary_path: Binary the records describe
            output_path: Destination file

        Raises:
            DebugInfoWriteError: The document could not be written
        """
        try:
            document = self.to_document(binary_path)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, "w", encoding="utf-8") as f:
                json.dump(document, f, indent=2)
        except OSError as e:
            raise DebugInfoWriteError(f"Failed to write {output_path}: {e}") from e

        logger.info(
            f"Wrote {output_path}: {len(self.structs)} structs, "
            f"{len(self.function_types)} prototypes, {len(self.functions)} functions, "
            f"{len(self.globals)} globals"
        )
