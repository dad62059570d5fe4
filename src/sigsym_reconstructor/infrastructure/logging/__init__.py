#!/usr/bin/env python3

"""Run logging: console and file handlers, call timing and per-phase progress."""

from .logger_setup import LoggerSetup
from .progress_tracker import ProgressTracker
from .utils import get_logger, log_timing

__all__ = [
    "LoggerSetup",
    "ProgressTracker",
    "get_logger",
    "log_timing",
]
