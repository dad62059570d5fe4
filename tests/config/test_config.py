"""Tests for configuration management functionality."""

from pathlib import Path

import pytest

from sigsym_reconstructor.infrastructure.config import Config

ENV_VARS = (
    "BINARY_FILE_PATH",
    "SOURCE_FILE_PATH",
    "SYMBOL_CONFIG_PATH",
    "OUTPUT_PATH",
    "CLANG_ARGS",
    "VERBOSE",
    "LOG_DIR",
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Run each test in an empty directory with no configuration variables set."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.mark.unit
def test_config_defaults() -> None:
    """Test configuration with nothing set."""
    config = Config.from_env()
    assert config.binary_path is None
    assert config.source_path is None
    assert config.symbol_config_path is None
    assert config.clang_args == []
    assert config.verbose is False
    assert config.log_dir == Path("logs")


@pytest.mark.unit
def test_config_env_loading(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test loading configuration from environment variables."""
    monkeypatch.setenv("BINARY_FILE_PATH", "game.exe")
    monkeypatch.setenv("SOURCE_FILE_PATH", "game.c")
    monkeypatch.setenv("SYMBOL_CONFIG_PATH", "signatures.json")
    monkeypatch.setenv("CLANG_ARGS", '-Iinclude -DNAME="two words"')
    monkeypatch.setenv("VERBOSE", "yes")

    config = Config.from_env()

    assert config.binary_path == Path("game.exe")
    assert config.source_path == Path("game.c")
    assert config.symbol_config_path == Path("signatures.json")
    assert config.clang_args == ["-Iinclude", "-DNAME=two words"]
    assert config.verbose is True


@pytest.mark.unit
def test_config_env_file_loading(isolated_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Test loading configuration from a .env file."""
    env_file = isolated_env / ".env"
    env_file.write_text("BINARY_FILE_PATH=from_dotenv.exe\nVERBOSE=false\n", encoding="utf-8")
    # load_dotenv writes into os.environ; let monkeypatch undo it
    for name in ("BINARY_FILE_PATH", "VERBOSE"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)

    config = Config.from_env(env_file)

    assert config.binary_path == Path("from_dotenv.exe")
    assert config.verbose is False


@pytest.mark.unit
def test_config_from_args_overrides_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that explicit arguments win over the environment."""
    monkeypatch.setenv("BINARY_FILE_PATH", "env.exe")
    monkeypatch.setenv("CLANG_ARGS", "-DFROM_ENV")

    config = Config.from_args(
        binary_path=Path("cli.exe"),
        clang_args=['-I"C:/include"', "-DFROM_CLI"],
        verbose=True,
    )

    assert config.binary_path == Path("cli.exe")
    assert config.clang_args == ["-DFROM_ENV", "-IC:/include", "-DFROM_CLI"]
    assert config.verbose is True


@pytest.mark.unit
def test_config_validation(isolated_env: Path) -> None:
    """Test configuration validation and error handling."""
    binary = isolated_env / "game.exe"
    source = isolated_env / "game.c"

    with pytest.raises(ValueError, match="Binary file not specified"):
        Config().validate()

    with pytest.raises(ValueError, match="Binary file not found"):
        Config(binary_path=binary, source_path=source).validate()

    binary.write_bytes(b"MZ")
    with pytest.raises(ValueError, match="Source file not found"):
        Config(binary_path=binary, source_path=source).validate()

    source.write_text("int x;", encoding="utf-8")
    Config(binary_path=binary, source_path=source).validate()

    with pytest.raises(ValueError, match="Symbol config not found"):
        Config(
            binary_path=binary, source_path=source, symbol_config_path=isolated_env / "x.json"
        ).validate()


@pytest.mark.unit
def test_config_output_path() -> None:
    """Test the default output path next to the binary."""
    config = Config(binary_path=Path("bin/game.exe"))
    assert config.resolved_output_path() == Path("bin/game.exe.debuginfo.json")

    config.output_path = Path("out.json")
    assert config.resolved_output_path() == Path("out.json")
