"""Identify triads from notes or fretboard voicings.

This module answers the reverse question of the search engine: given
three sounding notes, which triad (and inversion) do they spell?
"""

from __future__ import annotations

from collections.abc import Iterable

from triad_voicing.errors import InvalidArgumentError
from triad_voicing.models import Inversion, Triad, TriadQuality, Voicing
from triad_voicing.pitch import PitchClass, as_pitch_class
from triad_voicing.triads import triad_pitch_classes
from triad_voicing.voicing.validation import actual_bass_note


def identify_notes(
    notes: Iterable[PitchClass | str],
    bass: PitchClass | str | None = None,
) -> list[Triad]:
    """Find every triad spelled by three distinct notes.

    Parameters
    ----------
    notes : Iterable[PitchClass | str]
        The sounding pitch classes, in any order and any spelling.
    bass : PitchClass | str | None
        The lowest sounding note; defaults to the first of ``notes``.

    Returns
    -------
    list[Triad]
        Matching triads ordered by root. Augmented triads divide the
        octave evenly, so they match three roots. Empty if the notes do
        not form a triad.

    Raises
    ------
    InvalidArgumentError
        If there are not exactly three distinct notes, or the bass is not
        one of them.

    Examples
    --------
    >>> [str(t) for t in identify_notes(["E", "G", "C"])]
    ['C Major 1st inversion']
    >>> len(identify_notes(["C", "E", "G#"]))
    3
    """
    pitch_classes = [as_pitch_class(n) for n in notes]
    if len(pitch_classes) != 3 or len(set(pitch_classes)) != 3:
        msg = f"Expected 3 distinct notes, got {[pc.name for pc in pitch_classes]}"
        raise InvalidArgumentError(msg)

    bass_pc = as_pitch_class(bass) if bass is not None else pitch_classes[0]
    if bass_pc not in pitch_classes:
        msg = f"Bass note {bass_pc.name} is not one of the given notes"
        raise InvalidArgumentError(msg)

    target = set(pitch_classes)
    matches: list[Triad] = []
    for index in range(12):
        root = PitchClass(index)
        for quality in TriadQuality:
            chord_tones = triad_pitch_classes(root, quality)
            if set(chord_tones) == target:
                matches.append(Triad(root, quality, Inversion(chord_tones.index(bass_pc))))
    return matches


def identify_voicing(voicing: Voicing) -> list[Triad]:
    """Identify the triad a voicing sounds, taking its lowest note as bass.

    Examples
    --------
    >>> from triad_voicing.fretboard import STANDARD_TUNING
    >>> v = Voicing.from_pairs([(4, 7), (3, 5), (2, 5)], STANDARD_TUNING)
    >>> [str(t) for t in identify_voicing(v)]
    ['C Major 1st inversion']
    """
    return identify_notes(voicing.pitch_classes, bass=actual_bass_note(voicing))
