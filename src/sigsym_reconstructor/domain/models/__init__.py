#!/usr/bin/env python3

"""Domain models for the reconstructor."""

from . import source, symbols, types

__all__ = [
    "source",
    "symbols",
    "types",
]
