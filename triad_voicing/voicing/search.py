"""Constrained search for playable triad voicings.

This module finds three-note fingerings for a triad and inversion:

1. the intended bass note is placed first, scanning strings from the
   lowest-pitched upwards;
2. the other two chord tones are sought on nearby strings, within a fret
   window around the bass fret;
3. candidates are pruned on pitch and string span, re-checked for their
   actual lowest note, validated, de-duplicated and finally ranked.

A request that is well-formed but has no playable voicing returns ``None``
or an empty list. Malformed arguments raise ``InvalidArgumentError``
before any search begins.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING

from triad_voicing.errors import InvalidArgumentError
from triad_voicing.fretboard import STANDARD_TUNING, check_max_fret, coerce_tuning, fretboard_pitches
from triad_voicing.models import (
    DEFAULT_NUM_FRETS,
    NUM_STRINGS,
    Inversion,
    Triad,
    TriadQuality,
    Tuning,
    Voicing,
)
from triad_voicing.pitch import Pitch, PitchClass
from triad_voicing.voicing.config import DEFAULT_SEARCH_CONFIG, SearchConfig, SearchOrder
from triad_voicing.voicing.scoring import ScoredVoicing, rank_voicings
from triad_voicing.voicing.validation import is_valid_voicing

if TYPE_CHECKING:
    import numpy as np
    from numpy.typing import NDArray

logger = logging.getLogger(__name__)

TuningLike = Tuning | Sequence[Pitch | str] | str


def nearby_strings(center: int, window: int) -> list[int]:
    """Strings within ``window`` of ``center``, nearest first, excluding it.

    Examples
    --------
    >>> nearby_strings(5, 3)
    [4, 3, 2]
    >>> nearby_strings(2, 1)
    [1, 3]
    """
    strings = [s for s in range(NUM_STRINGS) if s != center and abs(s - center) <= window]
    return sorted(strings, key=lambda s: abs(s - center))


def _scan_order(
    tuning: Tuning,
    config: SearchConfig,
    rng: random.Random,
) -> tuple[list[int], dict[int, list[int]]]:
    """Bass-string order and per-string neighbour lists for one attempt."""
    bass_strings = tuning.bass_to_treble()
    neighbours = {s: nearby_strings(s, config.string_window) for s in range(NUM_STRINGS)}
    if config.order is SearchOrder.SHUFFLED:
        rng.shuffle(bass_strings)
        for strings in neighbours.values():
            rng.shuffle(strings)
    return bass_strings, neighbours


def _scan(
    triad: Triad,
    tuning: Tuning,
    grid: NDArray[np.int_],
    config: SearchConfig,
    bass_strings: list[int],
    neighbours: dict[int, list[int]],
) -> Iterator[Voicing]:
    """Yield every valid voicing reachable in the given scan order."""
    bass, second, third = (pc.index for pc in triad.notes_in_order)
    pitch_classes = grid % 12
    max_fret = grid.shape[1] - 1
    window = config.search_fret_range

    for s1 in bass_strings:
        for f1 in range(max_fret + 1):
            if pitch_classes[s1, f1] != bass:
                continue

            frets = range(max(0, f1 - window), min(max_fret, f1 + window) + 1)
            for s2 in neighbours[s1]:
                for f2 in frets:
                    if pitch_classes[s2, f2] != second:
                        continue

                    for s3 in neighbours[s1]:
                        if s3 == s2:
                            continue
                        for f3 in frets:
                            if pitch_classes[s3, f3] != third:
                                continue

                            cells = ((s1, f1), (s2, f2), (s3, f3))
                            values = [int(grid[s, f]) for s, f in cells]

                            # Span checks before building the voicing
                            if max(values) - min(values) > config.pitch_span_limit:
                                continue
                            strings = (s1, s2, s3)
                            if max(strings) - min(strings) > config.string_span_limit:
                                continue

                            # The note placed as bass must also sound lowest
                            lowest = cells[values.index(min(values))]
                            if pitch_classes[lowest] != bass:
                                continue

                            voicing = Voicing.from_pairs(cells, tuning)
                            if is_valid_voicing(voicing, triad, config):
                                yield voicing


def search_voicings(
    triad: Triad,
    tuning: Tuning = STANDARD_TUNING,
    max_fret: int = DEFAULT_NUM_FRETS,
    count: int = 3,
    config: SearchConfig = DEFAULT_SEARCH_CONFIG,
) -> list[ScoredVoicing]:
    """Collect up to ``count`` distinct valid voicings and rank them.

    Each attempt scans in the order chosen by ``config.order`` and keeps
    the first voicing not collected yet. Every scan order visits the same
    set of candidates, so an attempt that finds nothing new ends the
    search early.

    Parameters
    ----------
    triad : Triad
        The triad and inversion to voice.
    tuning : Tuning
        Open-string pitches, treble string first.
    max_fret : int
        Highest fret the search may use.
    count : int
        Maximum number of voicings to collect.
    config : SearchConfig
        Constraints, attempt budget and scan order.

    Returns
    -------
    list[ScoredVoicing]
        Ranked candidates, most closed first; empty if none exist.
    """
    if not isinstance(count, int) or isinstance(count, bool) or count < 1:
        msg = f"count must be a positive integer, got {count!r}"
        raise InvalidArgumentError(msg)

    grid = fretboard_pitches(tuning, check_max_fret(max_fret))
    rng = random.Random(config.seed)

    found: list[Voicing] = []
    seen: set[frozenset] = set()
    attempts = 0
    while len(found) < count and attempts < config.max_attempts:
        attempts += 1
        bass_strings, neighbours = _scan_order(tuning, config, rng)
        candidates = _scan(triad, tuning, grid, config, bass_strings, neighbours)
        voicing = next((v for v in candidates if v.key() not in seen), None)
        if voicing is None:
            break
        seen.add(voicing.key())
        found.append(voicing)

    logger.debug(
        f"Searched {triad} up to fret {max_fret}: "
        f"{len(found)} voicing(s) in {attempts} attempt(s) ({config.order.value} order)"
    )
    if not found:
        logger.debug(f"No voicing found for {triad} within {max_fret} frets")
    return rank_voicings(found, triad)


def find_voicings(
    root: PitchClass | str,
    quality: TriadQuality | str,
    inversion: Inversion | int | str = Inversion.ROOT,
    tuning: TuningLike = STANDARD_TUNING,
    max_fret: int = DEFAULT_NUM_FRETS,
    count: int = 3,
    *,
    config: SearchConfig = DEFAULT_SEARCH_CONFIG,
) -> list[Voicing]:
    """Find up to ``count`` ranked voicings of a triad.

    Parameters
    ----------
    root : PitchClass | str
        The chord root (e.g., "C", "F#").
    quality : TriadQuality | str
        The triad quality (e.g., "major").
    inversion : Inversion | int | str
        Which chord tone must sound lowest.
    tuning : Tuning | Sequence[Pitch | str] | str
        A tuning, its open-string notes, or the name of a named tuning.
    max_fret : int
        Highest fret the search may use.
    count : int
        Maximum number of voicings to return.
    config : SearchConfig
        Constraints, attempt budget and scan order.

    Returns
    -------
    list[Voicing]
        Distinct voicings, most closed first. Empty if no voicing meets
        the constraints.

    Raises
    ------
    InvalidArgumentError
        If any argument is malformed or out of range.

    Examples
    --------
    >>> voicings = find_voicings("C", "major", "root", count=2)
    >>> len(voicings) <= 2
    True
    """
    triad = Triad.of(root, quality, inversion)
    tuning = coerce_tuning(tuning)
    return [s.voicing for s in search_voicings(triad, tuning, max_fret, count, config)]


def find_voicing(
    root: PitchClass | str,
    quality: TriadQuality | str,
    inversion: Inversion | int | str = Inversion.ROOT,
    tuning: TuningLike = STANDARD_TUNING,
    max_fret: int = DEFAULT_NUM_FRETS,
    *,
    config: SearchConfig = DEFAULT_SEARCH_CONFIG,
) -> Voicing | None:
    """Find the most closed voicing of a triad.

    A pool of ``config.single_result_pool`` candidates is ranked and the
    best is returned.

    Returns
    -------
    Voicing | None
        The best voicing, or None if no voicing meets the constraints.

    Examples
    --------
    >>> voicing = find_voicing("C", "major")
    >>> sorted(voicing.note_names)
    ['C', 'E', 'G']
    """
    voicings = find_voicings(
        root,
        quality,
        inversion,
        tuning,
        max_fret,
        config.single_result_pool,
        config=config,
    )
    return voicings[0] if voicings else None
