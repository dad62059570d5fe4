#!/usr/bin/env python3

"""Models describing the external C declaration tree."""

from .kind_constants import ALIAS_KINDS, CALLING_CONVENTIONS, PRIMITIVE_KINDS
from .source_kinds import (
    DeclarationKind,
    DiagnosticSeverity,
    SourceCallingConvention,
    SourceTypeKind,
)
from .source_nodes import SourceDeclaration, SourceDiagnostic, SourceType, SourceUnit

__all__ = [
    "ALIAS_KINDS",
    "CALLING_CONVENTIONS",
    "DeclarationKind",
    "DiagnosticSeverity",
    "PRIMITIVE_KINDS",
    "SourceCallingConvention",
    "SourceDeclaration",
    "SourceDiagnostic",
    "SourceType",
    "SourceTypeKind",
    "SourceUnit",
]
