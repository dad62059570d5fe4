#!/usr/bin/env python3

"""Logging helpers: module loggers and a timing decorator."""

import logging
from collections.abc import Callable
from functools import wraps
from time import perf_counter
from typing import Any, TypeVar, cast

F = TypeVar("F", bound=Callable[..., Any])


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module (pass ``__name__``)."""
    return logging.getLogger(name)


def log_timing(func: F) -> F:
    """
    Decorator logging how long a call takes, and how long it ran before failing.

    Args:
        func: Function to decorate

    Returns:
        Wrapped function
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = get_logger(func.__module__)
        func_name = func.__qualname__

        logger.debug(f"Starting {func_name}")
        start = perf_counter()
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            logger.error(f"Failed {func_name} after {perf_counter() - start:.2f}s: {e}")
            raise
        logger.debug(f"Completed {func_name} in {perf_counter() - start:.2f}s")
        return result

    return cast("F", wrapper)
