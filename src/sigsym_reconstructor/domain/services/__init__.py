#!/usr/bin/env python3

"""Domain services layer."""

from . import mapping, matching, translation

__all__ = [
    "mapping",
    "matching",
    "translation",
]
