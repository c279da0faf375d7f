"""Scoring and ranking of candidate voicings."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from triad_voicing.models import Inversion, Triad, Voicing
from triad_voicing.voicing.validation import actual_bass_note, pitch_span, string_span

BASE_SCORE = 1
INVERSION_MATCH_BONUS = 100
ROOT_IN_BASS_BONUS = 2

# Pitch span dominates; string span only breaks ties between equal pitch spans
PITCH_SPAN_WEIGHT = 10
STRING_SPAN_WEIGHT = 1


@dataclass(frozen=True)
class ScoredVoicing:
    """A voicing with its ranking metrics.

    Parameters
    ----------
    voicing : Voicing
        The candidate voicing.
    score : int
        Inversion-fit score (higher is better).
    span : int
        Weighted span metric (lower is more closed).
    """

    voicing: Voicing
    score: int
    span: int


def span_metric(voicing: Voicing) -> int:
    """Weighted closeness of a voicing: ``10 * pitch span + string span``."""
    return PITCH_SPAN_WEIGHT * pitch_span(voicing) + STRING_SPAN_WEIGHT * string_span(voicing)


def score_voicing(voicing: Voicing, triad: Triad) -> int:
    """Score how well a voicing realises the triad's inversion.

    Base score 1, plus 100 when the lowest note is the inversion's bass,
    plus 2 more when a root-position request has the root in the bass.

    Examples
    --------
    >>> from triad_voicing.fretboard import STANDARD_TUNING
    >>> v = Voicing.from_pairs([(4, 3), (3, 2), (2, 0)], STANDARD_TUNING)
    >>> score_voicing(v, Triad.of("C", "major"))
    103
    """
    bass = actual_bass_note(voicing)
    score = BASE_SCORE
    if bass == triad.bass:
        score += INVERSION_MATCH_BONUS
    if triad.inversion is Inversion.ROOT and bass == triad.root:
        score += ROOT_IN_BASS_BONUS
    return score


def rank_voicings(voicings: Iterable[Voicing], triad: Triad) -> list[ScoredVoicing]:
    """Rank voicings from most to least closed.

    Sorted ascending by span metric, then descending by score. The sort is
    stable, so remaining ties keep their input order.
    """
    scored = [ScoredVoicing(v, score_voicing(v, triad), span_metric(v)) for v in voicings]
    return sorted(scored, key=lambda s: (s.span, -s.score))
