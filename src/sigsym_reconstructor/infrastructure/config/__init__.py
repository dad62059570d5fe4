"""Infrastructure configuration module."""

from .application_config import Config
from .symbol_config import load_symbol_configuration, parse_symbol_configuration

__all__ = ["Config", "load_symbol_configuration", "parse_symbol_configuration"]
