"""Pitch-class and pitch arithmetic.

This module provides the 12 chromatic pitch classes (0-11, C=0), octave-
qualified pitches in scientific pitch notation, and the enharmonic
spellings that map onto them. Equality is always by pitch-class index or
absolute semitone value, never by spelling.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import total_ordering

from triad_voicing.errors import (
    InvalidArgumentError,
    InvalidNotationError,
    InvalidNoteNameError,
    InvalidOctaveRangeError,
)

# Canonical (sharp) spelling for each pitch class
NOTE_NAMES: tuple[str, ...] = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")

# Note name to pitch class (0-11, where C=0)
NOTE_TO_PC: dict[str, int] = {
    "C": 0,
    "C#": 1,
    "Db": 1,
    "D": 2,
    "D#": 3,
    "Eb": 3,
    "E": 4,
    "Fb": 4,
    "E#": 5,
    "F": 5,
    "F#": 6,
    "Gb": 6,
    "G": 7,
    "G#": 8,
    "Ab": 8,
    "A": 9,
    "A#": 10,
    "Bb": 10,
    "B": 11,
    "Cb": 11,
    "B#": 0,
}

ACCIDENTAL_OFFSETS: dict[str, int] = {"": 0, "#": 1, "b": -1}

# Common enharmonic pairs; naturals have no common alias
ENHARMONIC_ALIASES: dict[int, frozenset[str]] = {
    1: frozenset({"Db"}),
    3: frozenset({"Eb"}),
    6: frozenset({"Gb"}),
    8: frozenset({"Ab"}),
    10: frozenset({"Bb"}),
}

MIN_OCTAVE = 0
MAX_OCTAVE = 9

# Highest representable pitch value (B9)
MAX_PITCH_VALUE = (MAX_OCTAVE + 1) * 12 + 11

NOTE_RE = re.compile(r"^([A-Ga-g])([#b]?)$")
PITCH_RE = re.compile(r"^([A-Ga-g])([#b]?)(\d+)?$")


def _normalize(name: str) -> str:
    """Uppercase the letter of a note name, leaving the accidental alone."""
    return name[:1].upper() + name[1:]


def pitch_class_index(name: str) -> int:
    """Convert a note name to its pitch-class index.

    Parameters
    ----------
    name : str
        Note name (e.g., "C", "F#", "Bb"). The letter is case-insensitive.

    Returns
    -------
    int
        Pitch class (0-11, where C=0).

    Raises
    ------
    InvalidNoteNameError
        If the note name is not recognized.

    Examples
    --------
    >>> pitch_class_index("F#")
    6
    >>> pitch_class_index("bb")
    10
    """
    if isinstance(name, str):
        stripped = name.strip()
        if NOTE_RE.match(stripped):
            return NOTE_TO_PC[_normalize(stripped)]
    msg = f"Unknown note: {name!r}"
    raise InvalidNoteNameError(msg)


def pitch_class_name(index: int) -> str:
    """Return the canonical name for a pitch-class index.

    The index is reduced modulo 12, so interval arithmetic can be passed in
    directly.

    Examples
    --------
    >>> pitch_class_name(1)
    'C#'
    >>> pitch_class_name(14)
    'D'
    """
    return NOTE_NAMES[index % 12]


@dataclass(frozen=True, order=True)
class PitchClass:
    """One of the 12 chromatic pitch classes.

    Parameters
    ----------
    index : int
        Pitch-class index (0-11, where C=0).

    Examples
    --------
    >>> PitchClass.from_name("Db") == PitchClass.from_name("C#")
    True
    >>> PitchClass(1).name
    'C#'
    """

    index: int

    def __post_init__(self) -> None:
        if not isinstance(self.index, int) or not 0 <= self.index <= 11:
            msg = f"Pitch class index must be 0-11, got {self.index!r}"
            raise InvalidArgumentError(msg)

    @classmethod
    def from_name(cls, name: str) -> PitchClass:
        """Build a pitch class from any accepted spelling."""
        return cls(pitch_class_index(name))

    @property
    def name(self) -> str:
        """Canonical (sharp) spelling."""
        return NOTE_NAMES[self.index]

    @property
    def aliases(self) -> frozenset[str]:
        """Common enharmonic spellings other than the canonical one."""
        return ENHARMONIC_ALIASES.get(self.index, frozenset())

    def transpose(self, semitones: int) -> PitchClass:
        """Move by a number of semitones, wrapping around the octave."""
        return PitchClass((self.index + semitones) % 12)

    def __str__(self) -> str:
        return self.name


def as_pitch_class(value: PitchClass | str) -> PitchClass:
    """Coerce a pitch class or note name to a ``PitchClass``."""
    if isinstance(value, PitchClass):
        return value
    return PitchClass.from_name(value)


def enharmonic_aliases(value: PitchClass | str) -> frozenset[str]:
    """Return the alternate spellings of a pitch class.

    Parameters
    ----------
    value : PitchClass | str
        The pitch class, or any spelling of it. A ``PitchClass`` is taken
        to be spelled canonically.

    Returns
    -------
    frozenset[str]
        The common spellings that differ from the one given: empty for
        natural notes, one name for each accidental class.

    Examples
    --------
    >>> sorted(enharmonic_aliases("C#"))
    ['Db']
    >>> sorted(enharmonic_aliases("Db"))
    ['C#']
    >>> enharmonic_aliases("E")
    frozenset()
    """
    pitch_class = as_pitch_class(value)
    given = _normalize(value.strip()) if isinstance(value, str) else pitch_class.name
    return (pitch_class.aliases | {pitch_class.name}) - {given}


@total_ordering
@dataclass(frozen=True)
class Pitch:
    """An octave-qualified pitch.

    Parameters
    ----------
    pitch_class : PitchClass
        The chromatic class of the pitch.
    octave : int
        Octave number in scientific pitch notation (0-9).

    Examples
    --------
    >>> parse_pitch("C4").value
    60
    >>> parse_pitch("C#4") == parse_pitch("Db4")
    True
    """

    pitch_class: PitchClass
    octave: int

    def __post_init__(self) -> None:
        if not MIN_OCTAVE <= self.octave <= MAX_OCTAVE:
            msg = f"Octave must be between {MIN_OCTAVE} and {MAX_OCTAVE}, got {self.octave}"
            raise InvalidOctaveRangeError(msg)

    @classmethod
    def from_value(cls, value: int) -> Pitch:
        """Build a pitch from its absolute semitone value (C4 = 60)."""
        octave, index = divmod(value - 12, 12)
        return cls(PitchClass(index), octave)

    @property
    def value(self) -> int:
        """Absolute semitone value (C4 = 60, A4 = 69)."""
        return self.octave * 12 + self.pitch_class.index + 12

    @property
    def name(self) -> str:
        """Canonical spelling with octave (e.g., "C#4")."""
        return f"{self.pitch_class.name}{self.octave}"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Pitch):
            return NotImplemented
        return self.value < other.value

    def __str__(self) -> str:
        return self.name


def parse_pitch(notation: str, default_octave: int | None = None) -> Pitch:
    """Parse scientific pitch notation.

    Parameters
    ----------
    notation : str
        Note name with octave (e.g., "E2", "C#4", "Bb3").
    default_octave : int | None
        Octave used when ``notation`` carries none. If None, an octave
        is required.

    Returns
    -------
    Pitch
        The parsed pitch. Accidentals carry across octave boundaries, so
        "B#4" is C5 and "Cb4" is B3.

    Raises
    ------
    InvalidNotationError
        If the notation is malformed.
    InvalidOctaveRangeError
        If the octave (or the carried result) lies outside 0-9.

    Examples
    --------
    >>> parse_pitch("A4").value
    69
    >>> parse_pitch("E", default_octave=2).name
    'E2'
    """
    match = PITCH_RE.match(notation.strip()) if isinstance(notation, str) else None
    if match is None:
        msg = f"Invalid pitch notation: {notation!r}"
        raise InvalidNotationError(msg)

    letter, accidental, octave_str = match.groups()
    if octave_str is None:
        if default_octave is None:
            msg = f"Invalid pitch notation: {notation!r} (missing octave)"
            raise InvalidNotationError(msg)
        octave = default_octave
    else:
        octave = int(octave_str)

    if not MIN_OCTAVE <= octave <= MAX_OCTAVE:
        msg = f"Octave must be between {MIN_OCTAVE} and {MAX_OCTAVE}, got {octave}"
        raise InvalidOctaveRangeError(msg)

    value = (octave + 1) * 12 + NOTE_TO_PC[letter.upper()] + ACCIDENTAL_OFFSETS[accidental]
    return Pitch.from_value(value)


def add_semitones(pitch: Pitch, semitones: int) -> Pitch:
    """Transpose a pitch, carrying the octave in either direction.

    Examples
    --------
    >>> add_semitones(parse_pitch("B3"), 1).name
    'C4'
    >>> add_semitones(parse_pitch("C4"), -1).name
    'B3'
    """
    return Pitch.from_value(pitch.value + semitones)
