#!/usr/bin/env python3

"""Function signature construction."""

from typing import TYPE_CHECKING

from ....infrastructure.logging import get_logger
from ...errors import (
    InvalidCConvError,
    InvalidFuncArgsError,
    InvalidFuncError,
    InvalidFuncNameError,
    InvalidRetnTypeError,
)
from ...models.source import (
    CALLING_CONVENTIONS,
    DeclarationKind,
    SourceDeclaration,
    SourceType,
)
from ...models.types import FunctionSignature, NamedFunction

if TYPE_CHECKING:
    from .type_translator import TypeTranslator

logger = get_logger(__name__)


class FunctionSignatureBuilder:
    """Builds FunctionSignatures from function prototype types.

    Attributes:
        translator: Type translator used for the return and parameter types
    """

    def __init__(self, translator: "TypeTranslator"):
        self.translator = translator

    def build(self, function_type: SourceType) -> FunctionSignature:
        """Translate a function prototype.

        Args:
            function_type: Function prototype type node

        Returns:
            FunctionSignature with return type, parameters and calling convention

        Raises:
            InvalidRetnTypeError: No result type
            InvalidFuncArgsError: Parameter list unavailable
            InvalidCConvError: Calling convention outside the supported set
        """
        spelling = function_type.spelling

        result_type = function_type.result_type()
        if result_type is None:
            raise InvalidRetnTypeError(spelling)
        return_type = self.translator.translate(result_type)

        argument_types = function_type.argument_types()
        if argument_types is None:
            raise InvalidFuncArgsError(spelling)
        parameters = tuple(self.translator.translate(arg) for arg in argument_types)

        source_cconv = function_type.calling_convention()
        cconv = CALLING_CONVENTIONS.get(source_cconv) if source_cconv is not None else None
        if cconv is None:
            logger.debug(f"Unsupported calling convention {source_cconv!r} on {spelling!r}")
            raise InvalidCConvError(spelling)

        return FunctionSignature(return_type, parameters, cconv)

    def build_named(self, declaration: SourceDeclaration) -> NamedFunction:
        """Translate a function declaration, keeping its linkage name.

        Raises:
            InvalidFuncNameError: Declaration has no linkage name
            InvalidFuncError: Not a function, or no type attached
        """
        name = declaration.linkage_name
        if not name:
            raise InvalidFuncNameError(declaration.location)

        function_type = declaration.type
        if declaration.kind is not DeclarationKind.FUNCTION or function_type is None:
            raise InvalidFuncError(declaration.display_name or declaration.location)

        return NamedFunction(name, self.build(function_type))
