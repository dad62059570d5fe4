"""Signature-driven debug-info reconstruction for stripped binaries."""

from .application import DebugInfoReconstructor, reconstruct
from .infrastructure.config import Config
from .main import main

__all__ = ["Config", "DebugInfoReconstructor", "main", "reconstruct"]
