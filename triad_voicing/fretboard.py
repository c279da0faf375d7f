"""Fretboard mapping between positions and pitches.

This module translates ``(string, fret)`` positions into pitches and note
names for a given tuning, and finds every position that sounds a note.
It holds no state: every function takes the tuning and fret count from
the caller.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import numpy as np

from triad_voicing.errors import InvalidFretError, InvalidTuningError
from triad_voicing.models import DEFAULT_NUM_FRETS, MAX_FRETS, FretPosition, Tuning
from triad_voicing.pitch import MAX_PITCH_VALUE, Pitch, PitchClass, add_semitones, as_pitch_class, parse_pitch

if TYPE_CHECKING:
    from numpy.typing import NDArray

# Standard tuning, treble string first
STANDARD_TUNING = Tuning.parse(["E4", "B3", "G3", "D3", "A2", "E2"])

# Alternative tunings, treble string first
NAMED_TUNINGS: dict[str, Tuning] = {
    "Standard": STANDARD_TUNING,
    "Drop D": Tuning.parse(["E", "B", "G", "D", "A", "D"]),
    "Open G": Tuning.parse(["D", "B", "G", "D", "G", "D"]),
    "Open D": Tuning.parse(["D", "A", "F#", "D", "A", "D"]),
    "DADGAD": Tuning.parse(["D", "A", "G", "D", "A", "D"]),
}


def get_tuning(name: str) -> Tuning:
    """Look up a named tuning (case-insensitive).

    Examples
    --------
    >>> get_tuning("drop d")[5].name
    'D2'
    """
    for key, tuning in NAMED_TUNINGS.items():
        if key.lower() == name.strip().lower():
            return tuning
    msg = f"Unknown tuning: {name!r}. Choose from {', '.join(NAMED_TUNINGS)}."
    raise InvalidTuningError(msg)


def coerce_tuning(tuning: Tuning | Sequence[Pitch | str] | str) -> Tuning:
    """Accept a tuning, its open-string notes, or a named tuning."""
    if isinstance(tuning, Tuning):
        return tuning
    if isinstance(tuning, str):
        return get_tuning(tuning)
    return Tuning.parse(tuning)


def check_max_fret(max_fret: int) -> int:
    """Validate a fret-count limit (0 to ``MAX_FRETS``)."""
    if not isinstance(max_fret, int) or isinstance(max_fret, bool) or not 0 <= max_fret <= MAX_FRETS:
        msg = f"Invalid fret limit: {max_fret!r}. Must be 0-{MAX_FRETS}."
        raise InvalidFretError(msg)
    return max_fret


def pitch_at(tuning: Tuning, string: int, fret: int) -> Pitch:
    """Return the pitch sounded at a fretboard position.

    Parameters
    ----------
    tuning : Tuning
        Open-string pitches, treble string first.
    string : int
        String index (0-5).
    fret : int
        Fret number (0 to ``MAX_FRETS``).

    Raises
    ------
    InvalidStringError
        If the string index is out of range.
    InvalidFretError
        If the fret is out of range.

    Examples
    --------
    >>> pitch_at(STANDARD_TUNING, 4, 3).name
    'C3'
    """
    position = FretPosition(string, fret)
    return add_semitones(tuning[position.string], position.fret)


def note_at(tuning: Tuning, string: int, fret: int) -> PitchClass:
    """Return the pitch class sounded at a fretboard position.

    Examples
    --------
    >>> note_at(STANDARD_TUNING, 0, 0).name
    'E'
    >>> note_at(STANDARD_TUNING, 5, 12) == note_at(STANDARD_TUNING, 5, 0)
    True
    """
    return pitch_at(tuning, string, fret).pitch_class


def fretboard_pitches(tuning: Tuning, max_fret: int = DEFAULT_NUM_FRETS) -> NDArray[np.int_]:
    """Absolute pitch values of every position up to ``max_fret``.

    Returns
    -------
    NDArray[np.int_]
        Array of shape ``(6, max_fret + 1)``; entry ``[s, f]`` is the
        semitone value of string ``s`` at fret ``f``.

    Raises
    ------
    InvalidFretError
        If the fret limit is out of range, or would carry a string above B9.
    """
    check_max_fret(max_fret)
    open_values = np.array([p.value for p in tuning], dtype=int)
    highest = int(open_values.max()) + max_fret
    if highest > MAX_PITCH_VALUE:
        msg = f"Fret limit {max_fret} carries the tuning above B9 (pitch value {highest} > {MAX_PITCH_VALUE})"
        raise InvalidFretError(msg)
    return np.add.outer(open_values, np.arange(max_fret + 1, dtype=int))


def find_all_positions(
    tuning: Tuning,
    target: PitchClass | Pitch | str,
    max_fret: int = DEFAULT_NUM_FRETS,
) -> list[FretPosition]:
    """Find every position within range that sounds a note.

    Parameters
    ----------
    tuning : Tuning
        Open-string pitches, treble string first.
    target : PitchClass | Pitch | str
        A pitch class or bare name ("C") matches in every octave; a pitch
        or octave-qualified name ("C4") matches exactly.
    max_fret : int
        Highest fret to consider.

    Returns
    -------
    list[FretPosition]
        Matching positions ordered by string, then fret.

    Examples
    --------
    >>> [str(p) for p in find_all_positions(STANDARD_TUNING, "C4", 5)]
    ['S1F1', 'S2F5']
    """
    if isinstance(target, str):
        stripped = target.strip()
        target = parse_pitch(stripped) if stripped[-1:].isdigit() else as_pitch_class(stripped)

    grid = fretboard_pitches(tuning, max_fret)
    if isinstance(target, Pitch):
        mask = grid == target.value
    else:
        mask = grid % 12 == target.index

    return [FretPosition(int(s), int(f)) for s, f in np.argwhere(mask)]
