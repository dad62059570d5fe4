#!/usr/bin/env python3

"""Application layer: orchestration of a reconstruction run."""

from .reconstructor import DebugInfoReconstructor, ReconstructionReport, reconstruct

__all__ = [
    "DebugInfoReconstructor",
    "ReconstructionReport",
    "reconstruct",
]
