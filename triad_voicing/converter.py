"""Chord-name conversions for triads.

This module converts triads to and from three notations:

- display names used by the practice tool (e.g., "F# Minor 1st inversion");
- pychord lead-sheet symbols, where inversions are slash chords
  (e.g., "F#m/A");
- Harte notation, where inversions are bass degrees (e.g., "F#:min/b3").
"""

from __future__ import annotations

import re

from triad_voicing.errors import InvalidChordNameError, InvalidQualityError
from triad_voicing.models import Inversion, Triad, TriadQuality
from triad_voicing.pitch import PitchClass, pitch_class_index
from triad_voicing.triads import coerce_root, triad_pitch_classes

# Suffix appended to a display name for each inversion
INVERSION_SUFFIXES: dict[Inversion, str] = {
    Inversion.ROOT: "",
    Inversion.FIRST: " 1st inversion",
    Inversion.SECOND: " 2nd inversion",
}

CHORD_NAME_RE = re.compile(
    r"^\s*([A-Ga-g][#b]?)"  # Root note with optional accidental
    r"\s+(?i:(major|minor|diminished|augmented))"  # Quality word
    r"(?:\s+(?i:(1st|2nd|first|second)\s+inversion|(root)\s+position))?"  # Optional inversion
    r"\s*$"
)

ORDINAL_TO_INVERSION: dict[str, Inversion] = {
    "1st": Inversion.FIRST,
    "first": Inversion.FIRST,
    "2nd": Inversion.SECOND,
    "second": Inversion.SECOND,
}

# Mapping from pychord quality names to triad qualities
PYCHORD_TO_QUALITY: dict[str, TriadQuality] = {
    "": TriadQuality.MAJOR,
    "m": TriadQuality.MINOR,
    "dim": TriadQuality.DIMINISHED,
    "aug": TriadQuality.AUGMENTED,
}

QUALITY_TO_PYCHORD: dict[TriadQuality, str] = {
    TriadQuality.MAJOR: "",
    TriadQuality.MINOR: "m",
    TriadQuality.DIMINISHED: "dim",
    TriadQuality.AUGMENTED: "aug",
}

# Harte shorthand for each triad quality
QUALITY_TO_HARTE: dict[TriadQuality, str] = {
    TriadQuality.MAJOR: "maj",
    TriadQuality.MINOR: "min",
    TriadQuality.DIMINISHED: "dim",
    TriadQuality.AUGMENTED: "aug",
}

HARTE_TO_QUALITY: dict[str, TriadQuality] = {v: k for k, v in QUALITY_TO_HARTE.items()}

# Harte bass degree of the third and fifth for each quality
HARTE_BASS_DEGREES: dict[TriadQuality, tuple[str, str, str]] = {
    TriadQuality.MAJOR: ("1", "3", "5"),
    TriadQuality.MINOR: ("1", "b3", "5"),
    TriadQuality.DIMINISHED: ("1", "b3", "b5"),
    TriadQuality.AUGMENTED: ("1", "3", "#5"),
}


def format_chord_name(
    root: PitchClass | str,
    quality: TriadQuality | str,
    inversion: Inversion | int | str = Inversion.ROOT,
) -> str:
    """Format a triad as a display name.

    Parameters
    ----------
    root : PitchClass | str
        The chord root. It is printed with its canonical (sharp) spelling.
    quality : TriadQuality | str
        The triad quality.
    inversion : Inversion | int | str
        The inversion (root position adds no suffix).

    Returns
    -------
    str
        Display name (e.g., "C Major", "F# Minor 1st inversion").

    Examples
    --------
    >>> format_chord_name("C", "major")
    'C Major'
    >>> format_chord_name("Gb", "minor", 1)
    'F# Minor 1st inversion'
    """
    root_pc = coerce_root(root)
    quality = TriadQuality.parse(quality)
    inversion = Inversion.parse(inversion)
    return f"{root_pc.name} {quality.title}{INVERSION_SUFFIXES[inversion]}"


def parse_chord_name(text: str) -> Triad:
    """Parse a display name produced by :func:`format_chord_name`.

    Any root spelling and any case of the quality word are accepted, as is
    an explicit "root position" suffix.

    Raises
    ------
    InvalidChordNameError
        If the text is not a triad display name.

    Examples
    --------
    >>> triad = parse_chord_name("Bb Diminished 2nd inversion")
    >>> triad.root.name, triad.quality.value, triad.inversion.name
    ('A#', 'diminished', 'SECOND')
    """
    match = CHORD_NAME_RE.match(text) if isinstance(text, str) else None
    if match is None:
        msg = f"Invalid chord name: {text!r}"
        raise InvalidChordNameError(msg)

    root, quality, ordinal, _ = match.groups()
    inversion = ORDINAL_TO_INVERSION[ordinal.lower()] if ordinal else Inversion.ROOT
    return Triad(coerce_root(root), TriadQuality.parse(quality), inversion)


def _inversion_for_bass(triad_pcs: tuple[PitchClass, ...], bass: PitchClass, symbol: str) -> Inversion:
    """Find which chord tone a bass note is, or reject a foreign bass."""
    if bass not in triad_pcs:
        msg = f"Bass note {bass.name} is not a chord tone of {symbol!r}"
        raise InvalidChordNameError(msg)
    return Inversion(triad_pcs.index(bass))


def to_pychord(triad: Triad) -> str:
    """Convert a triad to a pychord lead-sheet symbol.

    Inversions become slash chords over the intended bass note.

    Examples
    --------
    >>> to_pychord(Triad.of("A", "minor"))
    'Am'
    >>> to_pychord(Triad.of("C", "major", "first"))
    'C/E'
    """
    result = f"{triad.root.name}{QUALITY_TO_PYCHORD[triad.quality]}"
    if triad.inversion is not Inversion.ROOT:
        result = f"{result}/{triad.bass.name}"
    return result


def from_pychord(chord_str: str) -> Triad:
    """Parse a pychord lead-sheet symbol into a triad.

    Parameters
    ----------
    chord_str : str
        Symbol such as "C", "F#m", "Bbdim" or "C/G".

    Returns
    -------
    Triad
        The triad, with its inversion taken from the slash bass.

    Raises
    ------
    InvalidChordNameError
        If pychord cannot parse the symbol, or the slash bass is not a
        chord tone.
    InvalidQualityError
        If the symbol is not one of the four triad qualities.

    Examples
    --------
    >>> triad = from_pychord("Am/C")
    >>> triad.quality.value, triad.inversion.name
    ('minor', 'FIRST')
    """
    from pychord import Chord as PyChord

    try:
        pc = PyChord(chord_str)
    except ValueError as e:
        msg = f"Invalid chord symbol: {chord_str!r}"
        raise InvalidChordNameError(msg) from e

    quality_name = str(pc.quality)
    if quality_name not in PYCHORD_TO_QUALITY:
        msg = f"Not a triad quality: {quality_name!r} in {chord_str!r}"
        raise InvalidQualityError(msg)

    root = coerce_root(pc.root)
    quality = PYCHORD_TO_QUALITY[quality_name]
    inversion = Inversion.ROOT
    if pc.on:
        bass = PitchClass(pitch_class_index(pc.on))
        inversion = _inversion_for_bass(triad_pitch_classes(root, quality), bass, chord_str)
    return Triad(root, quality, inversion)


def to_harte(triad: Triad) -> str:
    """Convert a triad to Harte notation.

    Inversions are written as the bass degree relative to the root.

    Examples
    --------
    >>> to_harte(Triad.of("A", "minor", "first"))
    'A:min/b3'
    >>> to_harte(Triad.of("B", "diminished", "second"))
    'B:dim/b5'
    """
    result = f"{triad.root.name}:{QUALITY_TO_HARTE[triad.quality]}"
    if triad.inversion is not Inversion.ROOT:
        result = f"{result}/{HARTE_BASS_DEGREES[triad.quality][triad.inversion]}"
    return result


def from_harte(chord_str: str) -> Triad:
    """Parse a Harte chord label into a triad.

    Parameters
    ----------
    chord_str : str
        Label such as "C:maj", "A:min/b3" or "G:maj/5".

    Returns
    -------
    Triad
        The triad, with its inversion taken from the bass degree.

    Raises
    ------
    InvalidChordNameError
        If the label cannot be parsed, or its bass degree is not a chord
        tone.
    InvalidQualityError
        If the label is not one of the four triad qualities.

    Examples
    --------
    >>> triad = from_harte("G:maj/5")
    >>> triad.root.name, triad.inversion.name
    ('G', 'SECOND')
    """
    from harte.harte import Harte
    from lark.exceptions import LarkError
    from music21.chord import ChordException

    try:
        hc = Harte(chord_str)
        root_name = hc.get_root()
        shorthand = hc.get_shorthand()
    except (LarkError, ChordException, ValueError) as e:
        msg = f"Invalid Harte label: {chord_str!r}"
        raise InvalidChordNameError(msg) from e

    shorthand = shorthand if shorthand else "maj"
    if shorthand not in HARTE_TO_QUALITY:
        msg = f"Not a triad quality: {shorthand!r} in {chord_str!r}"
        raise InvalidQualityError(msg)

    root = coerce_root(root_name)
    quality = HARTE_TO_QUALITY[shorthand]
    inversion = Inversion.ROOT
    if "/" in chord_str:
        degree = chord_str.split("/")[-1].strip()
        degrees = HARTE_BASS_DEGREES[quality]
        if degree not in degrees:
            msg = f"Bass degree {degree!r} is not a chord tone of {chord_str!r}"
            raise InvalidChordNameError(msg)
        inversion = Inversion(degrees.index(degree))
    return Triad(root, quality, inversion)
