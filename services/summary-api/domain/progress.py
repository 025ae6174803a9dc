"""Progress tracking for summary pipeline invocations."""

import threading


class ProgressTracker:
    """
    Single-valued progress gauge in the range 0-100.

    Values are not validated; callers pass checkpoint values that are already
    in range. An optional mirror tracker receives every update as well, which
    is how per-invocation trackers keep the legacy process-wide gauge current.
    """

    def __init__(self, mirror: "ProgressTracker | None" = None):
        self._value = 0
        self._mirror = mirror

    def reset(self) -> None:
        self.set(0)

    def set(self, value: int) -> None:
        self._value = value
        if self._mirror is not None:
            self._mirror.set(value)

    def get(self) -> int:
        return self._value


class ProgressBoard:
    """
    Registry of progress trackers keyed by invocation id.

    The board also owns the process-wide gauge served without an invocation
    id. With ``mirror_global`` enabled every invocation writes through to that
    gauge, reproducing the single shared value older clients poll. Concurrent
    invocations then overwrite each other's readings on the global gauge; the
    per-invocation readings stay isolated.
    """

    def __init__(
        self,
        mirror_global: bool = True,
        global_tracker: ProgressTracker | None = None,
    ):
        self._global = global_tracker or ProgressTracker()
        self._mirror_global = mirror_global
        self._trackers: dict[str, ProgressTracker] = {}
        self._lock = threading.Lock()

    @property
    def global_tracker(self) -> ProgressTracker:
        return self._global

    def open(self, invocation_id: str) -> ProgressTracker:
        """Registers and returns a fresh tracker for ``invocation_id``."""
        tracker = ProgressTracker(self._global if self._mirror_global else None)
        with self._lock:
            self._trackers[invocation_id] = tracker
        return tracker

    def close(self, invocation_id: str, tracker: ProgressTracker) -> None:
        """
        Resets ``tracker`` to idle and unregisters it.

        The registry entry is removed only while it still belongs to
        ``tracker``; a later run reusing the same id keeps its own entry.
        """
        with self._lock:
            if self._trackers.get(invocation_id) is tracker:
                del self._trackers[invocation_id]
        tracker.reset()

    def progress_for(self, invocation_id: str) -> int:
        """Returns the invocation's progress, or 0 when it is unknown or finished."""
        with self._lock:
            tracker = self._trackers.get(invocation_id)
        return tracker.get() if tracker is not None else 0

    def global_progress(self) -> int:
        return self._global.get()
