"""Triad voicing search, validation and ranking.

This sub-package finds playable three-note fingerings for a triad on a
six-string fretboard, checks voicings against ergonomic and inversion
constraints, and ranks candidates from most to least closed.
"""

from triad_voicing.voicing.config import DEFAULT_SEARCH_CONFIG, SearchConfig, SearchOrder
from triad_voicing.voicing.scoring import ScoredVoicing, rank_voicings, score_voicing, span_metric
from triad_voicing.voicing.search import find_voicing, find_voicings, nearby_strings, search_voicings
from triad_voicing.voicing.validation import (
    ValidationError,
    actual_bass_note,
    fret_span,
    has_unique_correct_notes,
    is_valid_voicing,
    matches_inversion,
    pitch_span,
    string_span,
    validate_voicing,
)

__all__ = [
    "DEFAULT_SEARCH_CONFIG",
    "ScoredVoicing",
    "SearchConfig",
    "SearchOrder",
    "ValidationError",
    "actual_bass_note",
    "find_voicing",
    "find_voicings",
    "fret_span",
    "has_unique_correct_notes",
    "is_valid_voicing",
    "matches_inversion",
    "nearby_strings",
    "pitch_span",
    "rank_voicings",
    "score_voicing",
    "search_voicings",
    "span_metric",
    "string_span",
    "validate_voicing",
]
