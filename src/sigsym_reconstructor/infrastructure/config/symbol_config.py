#!/usr/bin/env python3

"""Loading of the JSON symbol configuration (the signature table).

Document shape::

    {
        "functions": [{"name": "main", "pattern": "55 8B EC ?? 83"}],
        "globals": [{"name": "g_state", "pattern": "A1 ?? ?? ?? ??",
                     "offsets": [1], "relative": true}]
    }
"""

import json
from pathlib import Path
from typing import Any

from ...domain.errors import ConfigurationError
from ...domain.models.symbols import SymbolConfiguration, SymbolSpec
from ..logging import get_logger

logger = get_logger(__name__)

SECTIONS = ("functions", "globals")

# Field name -> accepted type, default
SPEC_FIELDS: dict[str, tuple[type, Any]] = {
    "pattern": (str, ""),
    "start_rva": (int, 0),
    "relative": (bool, False),
    "rip_relative": (bool, False),
    "rip_offset": (int, 0),
}


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _parse_spec(entry: Any, where: str) -> SymbolSpec:
    if not isinstance(entry, dict):
        raise ConfigurationError(f"{where}: expected an object, got {type(entry).__name__}")

    name = entry.get("name")
    if not isinstance(name, str) or not name:
        raise ConfigurationError(f"{where}: 'name' is required and must be a string")

    values: dict[str, Any] = {}
    for key, (expected, default) in SPEC_FIELDS.items():
        value = entry.get(key, default)
        valid = _is_int(value) if expected is int else isinstance(value, expected)
        if not valid:
            raise ConfigurationError(f"{where} ({name}): '{key}' must be {expected.__name__}")
        values[key] = value

    if values["start_rva"] < 0:
        raise ConfigurationError(f"{where} ({name}): 'start_rva' must not be negative")

    offsets = entry.get("offsets", [])
    if not isinstance(offsets, list) or not all(_is_int(offset) for offset in offsets):
        raise ConfigurationError(f"{where} ({name}): 'offsets' must be a list of integers")

    ignored = set(entry) - set(SPEC_FIELDS) - {"name", "offsets"}
    if ignored:
        logger.debug(f"{where} ({name}): ignoring unknown keys {sorted(ignored)}")

    return SymbolSpec(name=name, offsets=tuple(offsets), **values)


def parse_symbol_configuration(document: Any) -> SymbolConfiguration:
    """Build a SymbolConfiguration from a decoded JSON document.

    Args:
        document: Result of ``json.load``

    Returns:
        SymbolConfiguration with specs in document order

    Raises:
        ConfigurationError: If the document does not have the expected shape
    """
    if not isinstance(document, dict):
        raise ConfigurationError("Symbol configuration must be a JSON object")

    parsed: dict[str, tuple[SymbolSpec, ...]] = {}
    for section in SECTIONS:
        entries = document.get(section, [])
        if not isinstance(entries, list):
            raise ConfigurationError(f"'{section}' must be a list")
        parsed[section] = tuple(
            _parse_spec(entry, f"{section}[{i}]") for i, entry in enumerate(entries)
        )

    return SymbolConfiguration(functions=parsed["functions"], globals=parsed["globals"])


def load_symbol_configuration(path: Path | None) -> SymbolConfiguration:
    """Load the symbol configuration file.

    Args:
        path: JSON file, or None for an empty configuration (structs and
            prototypes are still emitted)

    Returns:
        SymbolConfiguration

    Raises:
        ConfigurationError: If the file cannot be read or decoded
    """
    if path is None:
        logger.info("No symbol configuration given, emitting types only")
        return SymbolConfiguration()

    try:
        with open(path, encoding="utf-8") as f:
            document = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Failed to load symbol configuration {path}: {e}") from e

    configuration = parse_symbol_configuration(document)
    logger.info(
        f"Loaded {len(configuration.functions)} functions and "
        f"{len(configuration.globals)} globals."
    )
    return configuration
