#!/usr/bin/env python3

"""Interfaces of the external C declaration tree.

The front end is an external collaborator; the translators only depend on
the protocols below. Accessors return ``None`` when the front end cannot
provide the requested information, and the translators decide which error
that becomes.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol

from .source_kinds import (
    DeclarationKind,
    DiagnosticSeverity,
    SourceCallingConvention,
    SourceTypeKind,
)


class SourceType(Protocol):
    """A type node of the declaration tree."""

    @property
    def kind(self) -> SourceTypeKind: ...

    @property
    def spelling(self) -> str: ...

    def canonical(self) -> "SourceType": ...

    def element_type(self) -> "SourceType | None": ...

    def size_of(self) -> int | None:
        """Size in bytes, or None if the type is incomplete or dependent."""
        ...

    def pointee(self) -> "SourceType | None": ...

    def declaration(self) -> "SourceDeclaration | None": ...

    def result_type(self) -> "SourceType | None": ...

    def argument_types(self) -> "Sequence[SourceType] | None": ...

    def calling_convention(self) -> SourceCallingConvention | None: ...

    def fields(self) -> "Sequence[SourceDeclaration] | None": ...

    def offset_of(self, field_name: str) -> int | None:
        """Offset of a field in bits, or None if it cannot be computed."""
        ...


class SourceDeclaration(Protocol):
    """A declaration (function, struct, variable or struct field)."""

    @property
    def kind(self) -> DeclarationKind: ...

    @property
    def display_name(self) -> str | None: ...

    @property
    def linkage_name(self) -> str | None: ...

    @property
    def location(self) -> str: ...

    @property
    def in_system_header(self) -> bool: ...

    @property
    def type(self) -> SourceType | None: ...


@dataclass(frozen=True)
class SourceDiagnostic:
    """A diagnostic emitted while parsing the C source."""

    severity: DiagnosticSeverity
    message: str

    def __str__(self) -> str:
        return self.message


class SourceUnit(Protocol):
    """A parsed C source file."""

    @property
    def diagnostics(self) -> Sequence[SourceDiagnostic]: ...

    def declarations(self, kind: DeclarationKind) -> Iterable[SourceDeclaration]:
        """Top-level declarations of ``kind``, excluding system headers."""
        ...
