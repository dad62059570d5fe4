#!/usr/bin/env python3

"""Progress tracking for reconstruction runs."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from time import perf_counter


class ProgressTracker:
    """
    Track and report reconstruction progress.

    Times each phase of a run (structs, prototypes, functions, globals) and
    keeps per-run counters used in the closing summary.
    """

    def __init__(self, logger: logging.Logger):
        """
        Initialize progress tracker.

        Args:
            logger: Logger instance for progress reporting
        """
        self.logger = logger
        self.start_time = perf_counter()
        self.struct_count = 0
        self.prototype_count = 0
        self.symbol_count = 0
        self.warning_count = 0
        self.operation_stack: list[str] = []

    @contextmanager
    def track_operation(self, operation_name: str) -> Iterator[None]:
        """
        Time a phase of the run.

        Args:
            operation_name: Name of the phase being tracked

        Yields:
            None
        """
        start = perf_counter()
        self.operation_stack.append(operation_name)
        self.logger.debug(f"Starting operation: {operation_name}")

        try:
            yield
            self.logger.debug(
                f"Completed operation: {operation_name} in {perf_counter() - start:.3f}s"
            )
        except Exception as e:
            elapsed = perf_counter() - start
            self.logger.error(
                f"Failed operation: {self.get_current_context()} after {elapsed:.3f}s: {e}"
            )
            raise
        finally:
            self.operation_stack.pop()

    def count_structs(self, count: int) -> None:
        self.struct_count += count

    def count_prototypes(self, count: int) -> None:
        self.prototype_count += count

    def count_symbols(self, resolved: int, warnings: int) -> None:
        """Record the outcome of one symbol finder pass."""
        self.symbol_count += resolved
        self.warning_count += warnings

    def get_current_context(self) -> str:
        """
        Describe the phases currently running.

        Returns:
            Phase names joined outermost first, or "idle"
        """
        if not self.operation_stack:
            return "idle"
        return " -> ".join(self.operation_stack)

    def report_summary(self) -> None:
        """Report final run statistics."""
        total_time = perf_counter() - self.start_time
        self.logger.info(
            f"Reconstruction complete: {self.struct_count} structs, "
            f"{self.prototype_count} prototypes, {self.symbol_count} symbols, "
            f"{self.warning_count} warnings in {total_time:.2f}s"
        )
