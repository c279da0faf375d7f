"""Search configuration for the voicing engine."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum

from triad_voicing.errors import InvalidArgumentError


class SearchOrder(Enum):
    """How each search attempt orders the strings it scans.

    FIXED scans in the same order every attempt; each attempt then yields
    the next unseen voicing in that order, and the search stops as soon as
    an attempt finds nothing new. SHUFFLED reorders the bass strings and
    their neighbours per attempt using a seeded random generator.
    """

    FIXED = "fixed"
    SHUFFLED = "shuffled"


@dataclass(frozen=True)
class SearchConfig:
    """Constraints and budget for a voicing search.

    Parameters
    ----------
    fret_span_limit : int
        Maximum distance between the lowest and highest fret (hand span).
    pitch_span_limit : int
        Maximum semitones between the lowest and highest note.
    string_span_limit : int
        Maximum distance between the outermost string indices.
    search_fret_range : int
        Frets above and below the bass fret searched for the upper notes.
    string_window : int
        Maximum string distance from the bass string searched for the upper
        notes.
    max_attempts : int
        Upper bound on search attempts per request.
    single_result_pool : int
        Candidates gathered and ranked when a single voicing is requested.
    order : SearchOrder
        Scan order per attempt.
    seed : int | None
        Seed for the shuffled order; None draws a fresh seed per call.
    """

    fret_span_limit: int = 5
    pitch_span_limit: int = 15
    string_span_limit: int = 2
    search_fret_range: int = 5
    string_window: int = 3
    max_attempts: int = 50
    single_result_pool: int = 5
    order: SearchOrder = SearchOrder.FIXED
    seed: int | None = None

    def __post_init__(self) -> None:
        for field in fields(self):
            if field.name in ("order", "seed"):
                continue
            value = getattr(self, field.name)
            minimum = 1 if field.name in ("max_attempts", "single_result_pool") else 0
            if not isinstance(value, int) or isinstance(value, bool) or value < minimum:
                msg = f"{field.name} must be an integer >= {minimum}, got {value!r}"
                raise InvalidArgumentError(msg)
        if not isinstance(self.order, SearchOrder):
            try:
                order = SearchOrder(self.order)
            except ValueError as e:
                msg = f"Unknown search order: {self.order!r}"
                raise InvalidArgumentError(msg) from e
            object.__setattr__(self, "order", order)


DEFAULT_SEARCH_CONFIG = SearchConfig()
