"""
Opt-in hot path profiling.

Set ``JSTREAM_PROFILE`` in the environment, or call
``set_profiling(True)``, to record call counts, time and work done by the
scanners, materialization and the encoder. Work is counted in characters
for the scanners and the encoder, and in events for materialization.
"""

import os
import time
from dataclasses import dataclass
from typing import Any

_enabled = __debug__ and "JSTREAM_PROFILE" in os.environ
_stats: dict[str, "HotPathStats"] = {}


@dataclass
class HotPathStats:
    """Accumulated cost of one profiled hot path."""

    name: str
    call_count: int = 0
    total_time_ns: int = 0
    items_processed: int = 0

    def record_call(self, duration_ns: int, items: int = 0) -> None:
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.items_processed += items

    @property
    def ns_per_item(self) -> float:
        """Average cost per character or event; 0.0 before any work."""
        if not self.items_processed:
            return 0.0
        return self.total_time_ns / self.items_processed


class ProfileContext:
    """
    Times the enclosed block under ``name`` when profiling is on.

    The block reports how much it processed by setting ``items`` on the
    context before leaving. Blocks that raise are not recorded.
    """

    __slots__ = ("name", "items", "_start_ns")

    def __init__(self, name: str) -> None:
        self.name = name
        self.items = 0
        self._start_ns = 0

    def __enter__(self) -> "ProfileContext":
        if _enabled:
            self._start_ns = time.perf_counter_ns()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if not _enabled or exc_type is not None or not self._start_ns:
            return
        stats = _stats.get(self.name)
        if stats is None:
            stats = _stats[self.name] = HotPathStats(self.name)
        stats.record_call(time.perf_counter_ns() - self._start_ns, self.items)


def set_profiling(enabled: bool) -> None:
    """Turns hot path recording on or off for the whole process."""
    global _enabled
    _enabled = enabled


def profiling_enabled() -> bool:
    return _enabled


def get_hot_path_stats() -> dict[str, HotPathStats]:
    """Returns a snapshot of the recorded statistics."""
    return dict(_stats)


def clear_hot_path_stats() -> None:
    _stats.clear()
