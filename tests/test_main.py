#!/usr/bin/env python3

"""Tests for the command line entry point."""

from pathlib import Path
from unittest.mock import patch

import pytest

from sigsym_reconstructor.application import ReconstructionReport
from sigsym_reconstructor.domain.errors import InvalidCConvError
from sigsym_reconstructor.main import attach_coptions, main, parse_args


@pytest.fixture
def inputs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> tuple[Path, Path]:
    for name in ("BINARY_FILE_PATH", "SOURCE_FILE_PATH", "SYMBOL_CONFIG_PATH", "CLANG_ARGS"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    binary = tmp_path / "game.exe"
    binary.write_bytes(b"MZ")
    source = tmp_path / "game.c"
    source.write_text("int g_counter;\n", encoding="utf-8")
    return binary, source


@pytest.mark.unit
def test_parse_args() -> None:
    args = parse_args(
        ["game.exe", "game.c", "-c", "sigs.json", "-o", "out.json", "-d", "-Iinc", "-d", "-DX", "-v"]
    )
    assert args.binary == Path("game.exe")
    assert args.source == Path("game.c")
    assert args.config == Path("sigs.json")
    assert args.output == Path("out.json")
    assert args.coptions == ["-Iinc", "-DX"]
    assert args.verbose is True


@pytest.mark.unit
def test_parse_args_accepts_dash_prefixed_coptions() -> None:
    args = parse_args(
        ["game.exe", "game.c", "-d", "-Iinclude", "--coptions", "-DWIN32", "-d=-std=c99", "-d", "-w"]
    )
    assert args.coptions == ["-Iinclude", "-DWIN32", "-std=c99", "-w"]
    assert args.verbose is False


@pytest.mark.unit
def test_parse_args_coption_flag_without_value() -> None:
    with pytest.raises(SystemExit) as exc_info:
        parse_args(["game.exe", "game.c", "-d"])
    assert exc_info.value.code == 2


@pytest.mark.unit
def test_attach_coptions_leaves_other_tokens_alone() -> None:
    assert attach_coptions(["a", "-v", "-d", "-Iinc", "--", "-d", "x"]) == [
        "a",
        "-v",
        "--coptions=-Iinc",
        "--",
        "-d",
        "x",
    ]


@pytest.mark.unit
def test_parse_args_requires_inputs() -> None:
    with pytest.raises(SystemExit):
        parse_args(["game.exe"])


@pytest.mark.unit
def test_success(inputs: tuple[Path, Path], clean_logging: None) -> None:
    binary, source = inputs
    with patch(
        "sigsym_reconstructor.main.reconstruct", return_value=ReconstructionReport()
    ) as reconstruct:
        with pytest.raises(SystemExit) as exc_info:
            main([str(binary), str(source), "-d", "-Iinclude", "-d", "-DWIN32"])

    assert exc_info.value.code == 0
    config = reconstruct.call_args.args[0]
    assert config.binary_path == binary
    assert config.clang_args == ["-Iinclude", "-DWIN32"]
    assert config.resolved_output_path() == binary.with_name("game.exe.debuginfo.json")


@pytest.mark.unit
def test_missing_input_file(
    inputs: tuple[Path, Path], capsys: pytest.CaptureFixture[str], clean_logging: None
) -> None:
    binary, _ = inputs
    with pytest.raises(SystemExit) as exc_info:
        main([str(binary), "missing.c"])

    assert exc_info.value.code == 1
    assert "Configuration error" in capsys.readouterr().err


@pytest.mark.unit
def test_fatal_error_exits_with_failure(inputs: tuple[Path, Path], clean_logging: None) -> None:
    binary, source = inputs
    with patch(
        "sigsym_reconstructor.main.reconstruct", side_effect=InvalidCConvError("int (void)")
    ):
        with pytest.raises(SystemExit) as exc_info:
            main([str(binary), str(source)])

    assert exc_info.value.code == 1
