"""Search configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class VisitedBackend(StrEnum):
    radix = "radix"
    hash = "hash"


@dataclass(frozen=True)
class SearchConfig:
    """Knobs for a single ``Solver`` run.

    ``dedup`` switches the visited set on or off; with it off, only no-op
    moves are pruned.  ``progress_every`` logs a progress line every N
    expansions (0 disables).
    """

    dedup: bool = True
    visited: VisitedBackend = VisitedBackend.radix
    progress_every: int = 0

    def __post_init__(self) -> None:
        if self.progress_every < 0:
            raise ValueError(
                f"progress_every must be >= 0, got {self.progress_every}."
            )
