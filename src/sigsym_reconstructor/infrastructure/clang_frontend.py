#!/usr/bin/env python3

"""C front end backed by libclang.

Wraps ``clang.cindex`` cursors and types so they satisfy the SourceDeclaration
and SourceType protocols. libclang signals missing information with invalid
kinds, empty names and negative sizes/offsets; the wrappers turn all of
these into ``None``.
"""

from collections.abc import Iterator, Sequence
from pathlib import Path

from clang import cindex

from ..domain.errors import SourceParseError
from ..domain.models.source import (
    DeclarationKind,
    DiagnosticSeverity,
    SourceCallingConvention,
    SourceDiagnostic,
    SourceTypeKind,
)
from .logging import get_logger

logger = get_logger(__name__)

DECLARATION_KINDS: dict[str, DeclarationKind] = {
    "FUNCTION_DECL": DeclarationKind.FUNCTION,
    "STRUCT_DECL": DeclarationKind.STRUCT,
    "VAR_DECL": DeclarationKind.VARIABLE,
    "FIELD_DECL": DeclarationKind.VARIABLE,
}


def _format_location(location: cindex.SourceLocation) -> str:
    file_name = location.file.name if location.file is not None else "<unknown>"
    return f"{file_name}:{location.line}:{location.column}"


class ClangType:
    """SourceType over a ``cindex.Type``."""

    def __init__(self, clang_type: cindex.Type):
        self._type = clang_type

    @staticmethod
    def wrap(clang_type: cindex.Type | None) -> "ClangType | None":
        if clang_type is None or clang_type.kind == cindex.TypeKind.INVALID:
            return None
        return ClangType(clang_type)

    @property
    def kind(self) -> SourceTypeKind:
        return SourceTypeKind.from_name(self._type.kind.name)

    @property
    def spelling(self) -> str:
        return str(self._type.spelling)

    def canonical(self) -> "ClangType":
        return ClangType(self._type.get_canonical())

    def element_type(self) -> "ClangType | None":
        return ClangType.wrap(self._type.get_array_element_type())

    def size_of(self) -> int | None:
        size = self._type.get_size()
        return size if size >= 0 else None

    def pointee(self) -> "ClangType | None":
        return ClangType.wrap(self._type.get_pointee())

    def declaration(self) -> "ClangDeclaration | None":
        cursor = self._type.get_declaration()
        if cursor is None or cursor.kind == cindex.CursorKind.NO_DECL_FOUND:
            return None
        return ClangDeclaration(cursor)

    def result_type(self) -> "ClangType | None":
        return ClangType.wrap(self._type.get_result())

    def argument_types(self) -> list["ClangType"] | None:
        # argument_types() raises on anything but a prototype
        if self._type.kind != cindex.TypeKind.FUNCTIONPROTO:
            return None
        return [ClangType(arg) for arg in self._type.argument_types()]

    def calling_convention(self) -> SourceCallingConvention | None:
        value = cindex.conf.lib.clang_getFunctionTypeCallingConv(self._type)
        try:
            return SourceCallingConvention(value)
        except ValueError:
            logger.debug(f"Unknown libclang calling convention {value} on {self.spelling!r}")
            return None

    def fields(self) -> list["ClangDeclaration"] | None:
        if self._type.kind != cindex.TypeKind.RECORD:
            return None
        return [ClangDeclaration(field) for field in self._type.get_fields()]

    def offset_of(self, field_name: str) -> int | None:
        offset = self._type.get_offset(field_name)
        return offset if offset >= 0 else None

    def __repr__(self) -> str:
        return f"ClangType({self.spelling!r}, {self._type.kind.name})"


class ClangDeclaration:
    """SourceDeclaration over a ``cindex.Cursor``."""

    def __init__(self, cursor: cindex.Cursor):
        self._cursor = cursor

    @property
    def kind(self) -> DeclarationKind:
        return DECLARATION_KINDS.get(self._cursor.kind.name, DeclarationKind.OTHER)

    @property
    def display_name(self) -> str | None:
        return self._cursor.displayname or None

    @property
    def linkage_name(self) -> str | None:
        return self._cursor.spelling or None

    @property
    def location(self) -> str:
        return _format_location(self._cursor.location)

    @property
    def in_system_header(self) -> bool:
        return bool(self._cursor.location.is_in_system_header)

    @property
    def type(self) -> ClangType | None:
        return ClangType.wrap(self._cursor.type)

    def is_definition(self) -> bool:
        return bool(self._cursor.is_definition())

    def __repr__(self) -> str:
        return f"ClangDeclaration({self.display_name!r} at {self.location})"


class ClangSourceUnit:
    """SourceUnit over a ``cindex.TranslationUnit``."""

    def __init__(self, translation_unit: cindex.TranslationUnit):
        self._tu = translation_unit
        self._diagnostics = [
            SourceDiagnostic(
                DiagnosticSeverity(diag.severity),
                f"{_format_location(diag.location)}: {diag.spelling}",
            )
            for diag in translation_unit.diagnostics
        ]

    @property
    def diagnostics(self) -> Sequence[SourceDiagnostic]:
        return self._diagnostics

    def declarations(self, kind: DeclarationKind) -> Iterator[ClangDeclaration]:
        """Top-level declarations of ``kind`` outside system headers.

        Struct forward declarations are skipped, only definitions carry a
        layout.
        """
        for cursor in self._tu.cursor.get_children():
            declaration = ClangDeclaration(cursor)
            if declaration.kind is not kind or declaration.in_system_header:
                continue
            if kind is DeclarationKind.STRUCT and not declaration.is_definition():
                continue
            yield declaration


class ClangFrontend:
    """Parses C sources with libclang."""

    def __init__(self) -> None:
        try:
            self.index = cindex.Index.create()
        except cindex.LibclangError as e:
            raise SourceParseError(f"libclang could not be loaded: {e}") from e

    def parse(self, source_path: Path, args: Sequence[str], is_64: bool) -> ClangSourceUnit:
        """Parse one C source file.

        Args:
            source_path: C file to parse
            args: Extra compiler options (e.g. ``-I`` include paths)
            is_64: Target bit-width; 32-bit targets are parsed with ``-m32``

        Returns:
            ClangSourceUnit for the file

        Raises:
            SourceParseError: libclang could not produce a translation unit
        """
        clang_args = list(args)
        if not is_64:
            clang_args.append("-m32")

        logger.debug(f"Parsing {source_path} with args {clang_args}")
        try:
            translation_unit = self.index.parse(str(source_path), args=clang_args)
        except cindex.TranslationUnitLoadError as e:
            raise SourceParseError(f"{source_path}: {e}") from e

        return ClangSourceUnit(translation_unit)
