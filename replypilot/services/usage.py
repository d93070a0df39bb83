from collections import defaultdict


class UsageTracker:
    """
    Per-process reply counter keyed by an opaque caller id.

    Advisory only: it resets on restart, is not shared between processes and
    the increment is not atomic, so concurrent requests for one key can lose
    updates. ``limit`` of 0 disables the soft limit.
    """

    def __init__(self, limit: int = 0):
        self.limit = limit
        self._counts: dict[str, int] = defaultdict(int)

    def count(self, caller_id: str) -> int:
        return self._counts.get(caller_id, 0)

    def increment(self, caller_id: str) -> int:
        self._counts[caller_id] += 1
        return self._counts[caller_id]

    def is_over_limit(self, caller_id: str) -> bool:
        return self.limit > 0 and self.count(caller_id) >= self.limit

    def reset(self) -> None:
        """Clear all counters. Test and admin helper; no request path calls it."""
        self._counts.clear()
