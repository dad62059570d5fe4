#!/usr/bin/env python3

"""Symbol configuration model (the parsed signature table)."""

from dataclasses import dataclass, field

from .symbol_spec import SymbolSpec


@dataclass(frozen=True)
class SymbolConfiguration:
    """Ordered function and global symbol specs for one run."""

    functions: tuple[SymbolSpec, ...] = field(default_factory=tuple)
    globals: tuple[SymbolSpec, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.functions) + len(self.globals)
