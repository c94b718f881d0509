"""FIFO frontier of states waiting to be expanded."""

from __future__ import annotations

from collections import deque

from gatesolver.backend.engine.gamestate.state import GateState


class Frontier:
    """Unbounded FIFO queue; it owns every state it holds."""

    def __init__(self) -> None:
        self._queue: deque[GateState] = deque()

    def __len__(self) -> int:
        return len(self._queue)

    def __bool__(self) -> bool:
        return bool(self._queue)

    def enqueue(self, state: GateState) -> None:
        self._queue.append(state)

    def dequeue(self) -> GateState | None:
        """Pop the oldest state, or ``None`` when empty."""
        if not self._queue:
            return None
        return self._queue.popleft()

    def drain(self) -> int:
        """Release every queued state.  Returns how many were dropped."""
        n = len(self._queue)
        self._queue.clear()
        return n
