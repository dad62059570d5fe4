"""Main entry point for the signature-driven debug-info reconstructor."""

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from .application import reconstruct
from .domain.errors import ReconstructionError
from .infrastructure.config import Config
from .infrastructure.logging import LoggerSetup, get_logger, log_timing

COPTION_FLAGS = ("-d", "--coptions")


def attach_coptions(argv: list[str]) -> list[str]:
    """Glue each -d/--coptions flag to its value.

    Compiler options start with a dash, so argparse would otherwise read
    ``-d -Iinclude`` as two flags and reject the first for missing its value.
    """
    attached: list[str] = []
    tokens = iter(argv)
    for token in tokens:
        if token == "--":
            attached.append(token)
            attached.extend(tokens)
            break
        if token in COPTION_FLAGS:
            value = next(tokens, None)
            if value is not None:
                token = f"--coptions={value}"
        attached.append(token)
    return attached


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Reconstruct debug info for a stripped binary from a C source file "
        "and a table of byte signatures",
        epilog="""
Examples:
  # Structs and prototypes only (no signature table)
  python main.py game.exe game.c

  # Locate functions and globals with a signature table
  python main.py game.exe game.c -c signatures.json

  # Custom output path and include directories for libclang
  python main.py game.exe game.c -c signatures.json -o out/game.json -d -Iinclude -d -DWIN32

  # Using .env file for configuration
  echo 'SYMBOL_CONFIG_PATH=signatures.json' > .env
  python main.py game.exe game.c --verbose
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("binary", type=Path, metavar="BINARY", help="Input binary (PE or ELF)")
    parser.add_argument("source", type=Path, metavar="SOURCE", help="Input C source file")
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        metavar="CONFIG",
        help="Symbol signature table (JSON)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="OUTPUT",
        help="Output file (default: <BINARY>.debuginfo.json)",
    )
    parser.add_argument(
        "-d",
        "--coptions",
        action="append",
        default=[],
        metavar="OPTION",
        help="Option passed to libclang, e.g. -d -Iinclude or -d=-DWIN32 (repeatable)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output with debug logs",
    )
    if argv is None:
        argv = sys.argv[1:]
    return parser.parse_args(attach_coptions(argv))


@log_timing
def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point for debug-info reconstruction."""
    args = parse_args(argv)

    try:
        config = Config.from_args(
            binary_path=args.binary,
            source_path=args.source,
            symbol_config_path=args.config,
            output_path=args.output,
            clang_args=args.coptions,
            verbose=args.verbose,
        )
        config.validate()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    LoggerSetup.initialize(config.log_dir, verbose=config.verbose)
    logger = get_logger(__name__)

    logger.debug(f"Binary: {config.binary_path}")
    logger.debug(f"Source: {config.source_path}")
    logger.debug(f"Symbol config: {config.symbol_config_path}")

    try:
        report = reconstruct(config)
    except ReconstructionError as e:
        logger.error(f"Fatal error: {e}")
        sys.exit(1)

    logger.info("=" * 70)
    logger.info("RECONSTRUCTION SUMMARY")
    logger.info("=" * 70)
    logger.info(f"Structs: {len(report.structs)}")
    logger.info(f"Function prototypes: {len(report.function_types)}")
    logger.info(f"Functions located: {len(report.functions)}")
    logger.info(f"Globals located: {len(report.globals)}")
    logger.info(f"Warnings: {len(report.warnings)}")
    logger.info(f"Output: {config.resolved_output_path()}")

    sys.exit(0)


if __name__ == "__main__":
    main()
