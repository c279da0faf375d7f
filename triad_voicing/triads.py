"""Triad construction and inversion ordering.

This module maps each triad quality to its interval triple and builds the
root, third and fifth of a triad as pitch classes.
"""

from __future__ import annotations

from triad_voicing.errors import InvalidNoteNameError, InvalidQualityError, InvalidRootError
from triad_voicing.models import Inversion, TriadQuality
from triad_voicing.pitch import PitchClass, as_pitch_class

# Quality to semitones above the root (root, third, fifth)
TRIAD_INTERVALS: dict[TriadQuality, tuple[int, int, int]] = {
    TriadQuality.MAJOR: (0, 4, 7),
    TriadQuality.MINOR: (0, 3, 7),
    TriadQuality.DIMINISHED: (0, 3, 6),
    TriadQuality.AUGMENTED: (0, 4, 8),
}

Triple = tuple[PitchClass, PitchClass, PitchClass]


def coerce_root(root: PitchClass | str) -> PitchClass:
    """Coerce a chord root, reporting bad spellings as ``InvalidRootError``."""
    try:
        return as_pitch_class(root)
    except InvalidNoteNameError as e:
        msg = f"Invalid root note: {root!r}"
        raise InvalidRootError(msg) from e


def triad_pitch_classes(root: PitchClass | str, quality: TriadQuality | str) -> Triple:
    """Build the pitch classes of a triad.

    Parameters
    ----------
    root : PitchClass | str
        The chord root (e.g., "C", "F#", "Bb").
    quality : TriadQuality | str
        The triad quality (e.g., "major", "dim").

    Returns
    -------
    tuple[PitchClass, PitchClass, PitchClass]
        Root, third and fifth, in that order.

    Raises
    ------
    InvalidRootError
        If the root is not a recognized note name.
    InvalidQualityError
        If the quality is unknown, or its intervals do not give three
        distinct pitch classes.

    Examples
    --------
    >>> [pc.name for pc in triad_pitch_classes("D", "minor")]
    ['D', 'F', 'A']
    """
    root_pc = coerce_root(root)
    quality = TriadQuality.parse(quality)

    intervals = TRIAD_INTERVALS[quality]
    pitch_classes = tuple(root_pc.transpose(interval) for interval in intervals)
    if len(set(pitch_classes)) != 3:
        msg = f"Quality {quality.value!r} does not produce 3 distinct notes"
        raise InvalidQualityError(msg)
    return pitch_classes  # type: ignore[return-value]


def rotate_for_inversion(triple: Triple, inversion: Inversion | int | str) -> Triple:
    """Rotate a root-third-fifth triple so the intended bass comes first.

    Examples
    --------
    >>> c_major = triad_pitch_classes("C", "major")
    >>> [pc.name for pc in rotate_for_inversion(c_major, "second")]
    ['G', 'C', 'E']
    """
    n = Inversion.parse(inversion).value
    return (*triple[n:], *triple[:n])  # type: ignore[return-value]


def triad_notes(root: PitchClass | str, quality: TriadQuality | str) -> list[str]:
    """Return the canonical names of a triad's root, third and fifth.

    Examples
    --------
    >>> triad_notes("C", "major")
    ['C', 'E', 'G']
    >>> triad_notes("Bb", "augmented")
    ['A#', 'D', 'F#']
    """
    return [pc.name for pc in triad_pitch_classes(root, quality)]
