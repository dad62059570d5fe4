#!/usr/bin/env python3

"""Struct layout construction from struct definitions."""

from ....infrastructure.logging import get_logger
from ...errors import (
    InvalidFieldError,
    InvalidNameError,
    InvalidOffsetError,
    InvalidStructError,
    InvalidStructSizeError,
)
from ...models.source import DeclarationKind, SourceDeclaration, SourceType
from ...models.types import StructField, StructLayout
from .type_translator import TypeTranslator

logger = get_logger(__name__)


class StructLayoutBuilder:
    """Builds StructLayouts (name, byte-offset fields, total size).

    Bit-fields are rejected: a member whose bit offset is not a multiple of 8
    raises InvalidOffsetError.

    Attributes:
        translator: Type translator used for member types
    """

    def __init__(self, translator: TypeTranslator):
        self.translator = translator

    def build(self, declaration: SourceDeclaration) -> StructLayout:
        """Translate a struct definition.

        Args:
            declaration: Struct declaration from the source tree

        Returns:
            StructLayout of the struct

        Raises:
            InvalidStructError: Not a struct, or member list unavailable
            InvalidNameError: Struct or member without a name or type
            InvalidFieldError: Member without a type
            InvalidOffsetError: Member offset unavailable or not byte aligned
            InvalidStructSizeError: Struct size unavailable
        """
        if declaration.kind is not DeclarationKind.STRUCT:
            raise InvalidStructError(declaration.location)

        struct_type = declaration.type
        if struct_type is None:
            raise InvalidNameError("struct", declaration.location)

        name = declaration.display_name
        if not name:
            raise InvalidNameError("struct", declaration.location)

        members = struct_type.fields()
        if members is None:
            raise InvalidStructError(name)

        fields = tuple(self._build_field(name, struct_type, member) for member in members)

        size = struct_type.size_of()
        if size is None:
            raise InvalidStructSizeError(name)

        logger.debug(f"Struct {name}: {len(fields)} fields, {size} bytes")
        return StructLayout(name, fields, size)

    def _build_field(
        self, struct_name: str, struct_type: SourceType, member: SourceDeclaration
    ) -> StructField:
        field_name = member.display_name
        if not field_name:
            raise InvalidNameError("field", member.location)

        field_type = member.type
        if field_type is None:
            raise InvalidFieldError(f"{struct_name}.{field_name} has no type")
        translated = self.translator.translate(field_type)

        bit_offset = struct_type.offset_of(field_name)
        if bit_offset is None:
            raise InvalidOffsetError(f"of {struct_name}.{field_name}")
        # Front ends report offsets in bits
        if bit_offset % 8 != 0:
            raise InvalidOffsetError(
                f"of {struct_name}.{field_name}: bit offset {bit_offset} is not byte aligned "
                "(bit-fields are not supported)"
            )

        return StructField(field_name, translated, bit_offset // 8)
