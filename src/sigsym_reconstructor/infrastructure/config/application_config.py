"""Configuration management for the reconstructor."""

import os
import shlex
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

OUTPUT_SUFFIX = ".debuginfo.json"


@dataclass
class Config:
    """Configuration for one reconstruction run."""

    binary_path: Optional[Path] = None
    source_path: Optional[Path] = None
    symbol_config_path: Optional[Path] = None
    output_path: Optional[Path] = None
    clang_args: list[str] = field(default_factory=list)
    verbose: bool = False
    log_dir: Path = Path("logs")

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None) -> "Config":
        """
        Load configuration from environment variables or .env file.

        Args:
            env_path: Optional path to .env file (defaults to .env in current directory)

        Returns:
            Config object
        """
        if env_path is None:
            env_path = Path.cwd() / ".env"

        if env_path.exists():
            load_dotenv(env_path)

        def env_path_value(name: str) -> Optional[Path]:
            value = os.getenv(name)
            return Path(value) if value else None

        return cls(
            binary_path=env_path_value("BINARY_FILE_PATH"),
            source_path=env_path_value("SOURCE_FILE_PATH"),
            symbol_config_path=env_path_value("SYMBOL_CONFIG_PATH"),
            output_path=env_path_value("OUTPUT_PATH"),
            clang_args=shlex.split(os.getenv("CLANG_ARGS", "")),
            verbose=os.getenv("VERBOSE", "false").lower() in ("true", "1", "yes"),
            log_dir=Path(os.getenv("LOG_DIR", "logs")),
        )

    @classmethod
    def from_args(
        cls,
        binary_path: Optional[Path] = None,
        source_path: Optional[Path] = None,
        symbol_config_path: Optional[Path] = None,
        output_path: Optional[Path] = None,
        clang_args: Optional[list[str]] = None,
        verbose: Optional[bool] = None,
    ) -> "Config":
        """
        Create configuration from explicit arguments, falling back to environment.

        Clang options given on the command line are appended to CLANG_ARGS,
        with any double quotes stripped.

        Returns:
            Config object
        """
        config = cls.from_env()

        if binary_path is not None:
            config.binary_path = binary_path
        if source_path is not None:
            config.source_path = source_path
        if symbol_config_path is not None:
            config.symbol_config_path = symbol_config_path
        if output_path is not None:
            config.output_path = output_path
        if clang_args:
            config.clang_args.extend(arg.replace('"', "") for arg in clang_args)
        if verbose:
            config.verbose = True

        return config

    def validate(self) -> None:
        """
        Validate the configuration.

        Raises:
            ValueError: If configuration is invalid
        """
        for label, path in (("Binary", self.binary_path), ("Source", self.source_path)):
            if path is None:
                raise ValueError(f"{label} file not specified")
            if not path.is_file():
                raise ValueError(f"{label} file not found: {path}")

        if self.symbol_config_path is not None and not self.symbol_config_path.is_file():
            raise ValueError(f"Symbol config not found: {self.symbol_config_path}")

    def resolved_output_path(self) -> Path:
        """Output path, defaulting to the binary path plus ``.debuginfo.json``."""
        if self.output_path is not None:
            return self.output_path
        if self.binary_path is None:
            raise ValueError("Binary file not specified")
        return self.binary_path.with_name(self.binary_path.name + OUTPUT_SUFFIX)
