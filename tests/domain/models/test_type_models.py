#!/usr/bin/env python3

"""Unit tests for the debug-info type model."""

import pytest

from sigsym_reconstructor.domain.models.types import (
    ArrayType,
    CallingConvention,
    FunctionSignature,
    FunctionType,
    PointerType,
    PrimitiveKind,
    PrimitiveType,
    StructRef,
)

INT32 = PrimitiveType(PrimitiveKind.INT32)


class TestTypeNodes:
    @pytest.mark.unit
    def test_structural_equality(self) -> None:
        assert PointerType(StructRef("Node")) == PointerType(StructRef("Node"))
        assert ArrayType(INT32, 16) != ArrayType(INT32, 8)

    @pytest.mark.unit
    def test_hashable(self) -> None:
        assert len({INT32, PrimitiveType(PrimitiveKind.INT32), StructRef("A")}) == 2

    @pytest.mark.unit
    def test_array_to_dict(self) -> None:
        assert ArrayType(PointerType(INT32), 8).to_dict() == {
            "kind": "array",
            "element": {"kind": "pointer", "target": {"kind": "primitive", "primitive": "int32"}},
            "size": 8,
        }

    @pytest.mark.unit
    def test_function_to_dict(self) -> None:
        signature = FunctionSignature(
            PrimitiveType(PrimitiveKind.VOID), (INT32, StructRef("A")), CallingConvention.THIS_CALL
        )
        assert FunctionType(signature).to_dict() == {
            "kind": "function",
            "signature": {
                "return_type": {"kind": "primitive", "primitive": "void"},
                "parameters": [
                    {"kind": "primitive", "primitive": "int32"},
                    {"kind": "struct", "name": "A"},
                ],
                "calling_convention": "thiscall",
            },
        }

    @pytest.mark.unit
    def test_primitive_string_representation(self) -> None:
        assert str(PrimitiveKind.UINT64_QUAD) == "uint64"
