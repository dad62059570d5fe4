#!/usr/bin/env python3

"""Translation of source types into the closed debug-info type model.

Handles:
- Fixed-width primitives (one-to-one table lookup)
- Typedef and elaborated aliases (followed to the canonical type)
- Constant arrays, pointers and function prototypes (recursively)
- Records, which become name-only struct references
"""

from ....infrastructure.logging import get_logger
from ...errors import InvalidNameError, TypeTranslationError, UnknownTypeError
from ...models.source import ALIAS_KINDS, PRIMITIVE_KINDS, SourceType, SourceTypeKind
from ...models.types import (
    ArrayType,
    FunctionType,
    PointerType,
    PrimitiveType,
    StructRef,
    TypeNode,
)
from .function_builder import FunctionSignatureBuilder

logger = get_logger(__name__)


class TypeTranslator:
    """Converts source type nodes into TypeNodes.

    Struct bodies are never inlined. A record type always translates to a
    ``StructRef`` naming the struct, which the writer resolves against the
    layouts registered earlier in the run.

    Attributes:
        function_builder: Builder used for function prototype types
    """

    def __init__(self) -> None:
        self.function_builder = FunctionSignatureBuilder(self)

    def translate(self, source_type: SourceType) -> TypeNode:
        """Translate a source type.

        Args:
            source_type: Type node from the declaration tree

        Returns:
            Equivalent TypeNode

        Raises:
            TypeTranslationError: Array element/size or pointee unavailable
            InvalidNameError: Record type without a named declaration
            UnknownTypeError: Kind with no translation rule
            StructuralError: Any failure while building a nested function type
        """
        kind = source_type.kind

        primitive = PRIMITIVE_KINDS.get(kind)
        if primitive is not None:
            return PrimitiveType(primitive)

        if kind in ALIAS_KINDS:
            return self.translate(source_type.canonical())

        if kind is SourceTypeKind.CONSTANTARRAY:
            return self._translate_array(source_type)

        if kind is SourceTypeKind.FUNCTIONPROTO:
            return FunctionType(self.function_builder.build(source_type))

        if kind is SourceTypeKind.POINTER:
            pointee = source_type.pointee()
            if pointee is None:
                raise TypeTranslationError(
                    f"Couldn't get pointee type for {source_type.spelling!r}"
                )
            return PointerType(self.translate(pointee.canonical()))

        if kind is SourceTypeKind.RECORD:
            return self._translate_record(source_type)

        logger.debug(f"No translation rule for {source_type.spelling!r} ({kind.name})")
        raise UnknownTypeError(f"{source_type.spelling} ({kind.name})")

    def _translate_array(self, source_type: SourceType) -> ArrayType:
        element = source_type.element_type()
        if element is None:
            raise TypeTranslationError(
                f"Couldn't get element type for {source_type.spelling!r}"
            )

        size = source_type.size_of()
        if size is None:
            raise TypeTranslationError(f"Couldn't get array size for {source_type.spelling!r}")

        return ArrayType(self.translate(element), size)

    @staticmethod
    def _translate_record(source_type: SourceType) -> StructRef:
        declaration = source_type.declaration()
        name = declaration.display_name if declaration is not None else None
        if not name:
            raise InvalidNameError("type", source_type.spelling)
        return StructRef(name)
