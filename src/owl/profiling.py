"""Owl ScanAccumulator — opt-in profiling for lexical analysis.

This module provides accumulated metrics during scanning:
- Total scan time
- Source length
- Tokens produced and scans that failed

Zero overhead when disabled (get_scan_accumulator() returns None).

Example:
    from owl import tokenize
    from owl.profiling import profiled_scan

    with profiled_scan() as metrics:
        tokens = tokenize('page { "Hello" }')

    print(metrics.summary())
    # {"total_ms": 0.2, "source_length": 16, "token_count": 5, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class ScanAccumulator:
    """Accumulated metrics during scanning.

    Attributes:
        start_time: Profiling start timestamp.
        source_length: Total length of sources scanned.
        token_count: Tokens produced (partial streams of failed scans included).
        scan_calls: Number of scans recorded.
        error_count: Number of scans that ended in a ScanError.
        scan_ms: Time spent inside the scan loop, in milliseconds.

    """

    start_time: float = field(default_factory=perf_counter)
    source_length: int = 0
    token_count: int = 0
    scan_calls: int = 0
    error_count: int = 0
    scan_ms: float = 0.0

    def record_scan(
        self,
        source_length: int,
        token_count: int,
        elapsed_ms: float,
        *,
        failed: bool = False,
    ) -> None:
        """Record one scan.

        Args:
            source_length: Length of the source string scanned.
            token_count: Number of tokens produced.
            elapsed_ms: Duration of the scan loop.
            failed: True if the scan raised a ScanError.

        """
        self.scan_calls += 1
        self.source_length += source_length
        self.token_count += token_count
        self.scan_ms += elapsed_ms
        if failed:
            self.error_count += 1

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of scan metrics."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "scan_ms": round(self.scan_ms, 2),
            "source_length": self.source_length,
            "token_count": self.token_count,
            "scan_calls": self.scan_calls,
            "error_count": self.error_count,
        }


_accumulator: ContextVar[ScanAccumulator | None] = ContextVar(
    "scan_accumulator",
    default=None,
)


def get_scan_accumulator() -> ScanAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_scan() -> Iterator[ScanAccumulator]:
    """Context manager for profiled scanning.

    Creates a ScanAccumulator and makes it available via
    get_scan_accumulator() for the duration of the with block.

    Yields:
        ScanAccumulator that will be populated during scans.

    """
    acc = ScanAccumulator()
    token: Token[ScanAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
