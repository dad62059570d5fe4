#!/usr/bin/env python3

"""Unit tests for symbol configuration loading."""

import json
from pathlib import Path

import pytest

from sigsym_reconstructor.domain.errors import ConfigurationError
from sigsym_reconstructor.domain.models.symbols import SymbolConfiguration, SymbolSpec
from sigsym_reconstructor.infrastructure.config import (
    load_symbol_configuration,
    parse_symbol_configuration,
)


class TestParseSymbolConfiguration:
    @pytest.mark.unit
    def test_defaults(self) -> None:
        configuration = parse_symbol_configuration({"functions": [{"name": "main"}]})
        assert configuration.functions == (SymbolSpec("main"),)
        assert configuration.globals == ()

    @pytest.mark.unit
    def test_all_fields(self) -> None:
        configuration = parse_symbol_configuration(
            {
                "globals": [
                    {
                        "name": "g_state",
                        "pattern": "48 8B 05 ?? ?? ?? ??",
                        "offsets": [3, -4],
                        "relative": True,
                        "rip_relative": True,
                        "rip_offset": -7,
                    }
                ]
            }
        )
        assert configuration.globals == (
            SymbolSpec(
                "g_state",
                pattern="48 8B 05 ?? ?? ?? ??",
                offsets=(3, -4),
                relative=True,
                rip_relative=True,
                rip_offset=-7,
            ),
        )

    @pytest.mark.unit
    def test_order_is_preserved(self) -> None:
        configuration = parse_symbol_configuration(
            {"functions": [{"name": "b"}, {"name": "a"}, {"name": "c"}]}
        )
        assert [spec.name for spec in configuration.functions] == ["b", "a", "c"]
        assert len(configuration) == 3

    @pytest.mark.unit
    def test_empty_document(self) -> None:
        assert parse_symbol_configuration({}) == SymbolConfiguration()

    @pytest.mark.unit
    def test_extra_is_not_configurable(self) -> None:
        configuration = parse_symbol_configuration({"functions": [{"name": "f", "extra": 8}]})
        assert configuration.functions[0].extra == 0

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "document",
        [
            [],
            {"functions": {"name": "f"}},
            {"functions": ["f"]},
            {"functions": [{"pattern": "55"}]},
            {"functions": [{"name": ""}]},
            {"functions": [{"name": "f", "pattern": 85}]},
            {"functions": [{"name": "f", "start_rva": "0x1000"}]},
            {"functions": [{"name": "f", "start_rva": -1}]},
            {"functions": [{"name": "f", "relative": 1}]},
            {"functions": [{"name": "f", "rip_offset": True}]},
            {"functions": [{"name": "f", "offsets": 4}]},
            {"functions": [{"name": "f", "offsets": [1, "2"]}]},
        ],
    )
    def test_malformed(self, document: object) -> None:
        with pytest.raises(ConfigurationError):
            parse_symbol_configuration(document)


class TestLoadSymbolConfiguration:
    @pytest.mark.unit
    def test_no_path(self) -> None:
        assert load_symbol_configuration(None) == SymbolConfiguration()

    @pytest.mark.unit
    def test_load_file(self, tmp_path: Path) -> None:
        path = tmp_path / "signatures.json"
        path.write_text(
            json.dumps(
                {
                    "functions": [{"name": "main", "pattern": "55 8B EC"}],
                    "globals": [{"name": "g_tick", "start_rva": 4096}],
                }
            ),
            encoding="utf-8",
        )

        configuration = load_symbol_configuration(path)

        assert configuration.functions == (SymbolSpec("main", pattern="55 8B EC"),)
        assert configuration.globals == (SymbolSpec("g_tick", start_rva=0x1000),)

    @pytest.mark.unit
    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="Failed to load"):
            load_symbol_configuration(tmp_path / "missing.json")

    @pytest.mark.unit
    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "signatures.json"
        path.write_text("{functions: []}", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_symbol_configuration(path)
