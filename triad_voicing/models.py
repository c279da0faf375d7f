"""Data models for triads, tunings and fretboard voicings.

This module defines the immutable value objects shared by the triad model,
the fretboard mapping and the voicing search engine.

String indices follow one convention throughout the package: index 0 is
the highest-pitched (treble, "1st") string and index 5 the lowest-pitched
(bass, "6th") string.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from enum import Enum, IntEnum

from triad_voicing.errors import (
    InvalidArgumentError,
    InvalidFretError,
    InvalidInversionError,
    InvalidQualityError,
    InvalidStringError,
    InvalidTuningError,
)
from triad_voicing.pitch import (
    Pitch,
    PitchClass,
    add_semitones,
    parse_pitch,
    pitch_class_index,
)

NUM_STRINGS = 6
DEFAULT_NUM_FRETS = 12
MAX_FRETS = 24

# Open-string values of standard tuning (E4 B3 G3 D3 A2 E2), treble first.
# Bare note names in a tuning are placed nearest to these.
STANDARD_OPEN_VALUES: tuple[int, ...] = (64, 59, 55, 50, 45, 40)


class TriadQuality(Enum):
    """The four triad qualities."""

    MAJOR = "major"
    MINOR = "minor"
    DIMINISHED = "diminished"
    AUGMENTED = "augmented"

    @classmethod
    def parse(cls, value: TriadQuality | str) -> TriadQuality:
        """Parse a quality from the enum, its name or a short alias.

        Examples
        --------
        >>> TriadQuality.parse("Minor")
        <TriadQuality.MINOR: 'minor'>
        >>> TriadQuality.parse("dim")
        <TriadQuality.DIMINISHED: 'diminished'>
        """
        if isinstance(value, TriadQuality):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            if key in QUALITY_ALIASES:
                return QUALITY_ALIASES[key]
        msg = f"Unknown triad quality: {value!r}"
        raise InvalidQualityError(msg)

    @property
    def title(self) -> str:
        """Display name (e.g., "Major")."""
        return self.value.capitalize()


QUALITY_ALIASES: dict[str, TriadQuality] = {
    "major": TriadQuality.MAJOR,
    "maj": TriadQuality.MAJOR,
    "minor": TriadQuality.MINOR,
    "min": TriadQuality.MINOR,
    "diminished": TriadQuality.DIMINISHED,
    "dim": TriadQuality.DIMINISHED,
    "augmented": TriadQuality.AUGMENTED,
    "aug": TriadQuality.AUGMENTED,
}


class Inversion(IntEnum):
    """Which chord tone sounds lowest: root, third or fifth."""

    ROOT = 0
    FIRST = 1
    SECOND = 2

    @classmethod
    def parse(cls, value: Inversion | int | str) -> Inversion:
        """Parse an inversion from the enum, 0-2, or "root"/"first"/"second".

        Examples
        --------
        >>> Inversion.parse("first")
        <Inversion.FIRST: 1>
        >>> Inversion.parse(2)
        <Inversion.SECOND: 2>
        """
        if isinstance(value, Inversion):
            return value
        if isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= 2:
            return cls(value)
        if isinstance(value, str) and value.strip().upper() in cls.__members__:
            return cls[value.strip().upper()]
        msg = f"Invalid inversion: {value!r} (expected root, first or second)"
        raise InvalidInversionError(msg)

    @property
    def label(self) -> str:
        """Human-readable name (e.g., "1st Inversion")."""
        return INVERSION_LABELS[self]


INVERSION_LABELS: dict[Inversion, str] = {
    Inversion.ROOT: "Root Position",
    Inversion.FIRST: "1st Inversion",
    Inversion.SECOND: "2nd Inversion",
}


@dataclass(frozen=True)
class Triad:
    """A triad identity: root, quality and inversion.

    Parameters
    ----------
    root : PitchClass
        The chord root.
    quality : TriadQuality
        The triad quality.
    inversion : Inversion
        Which chord tone is intended as the bass.

    Examples
    --------
    >>> triad = Triad.of("A", "minor", "first")
    >>> [pc.name for pc in triad.pitch_classes]
    ['A', 'C', 'E']
    >>> triad.bass.name
    'C'
    """

    root: PitchClass
    quality: TriadQuality
    inversion: Inversion = Inversion.ROOT

    @classmethod
    def of(
        cls,
        root: PitchClass | str,
        quality: TriadQuality | str,
        inversion: Inversion | int | str = Inversion.ROOT,
    ) -> Triad:
        """Build a triad from loosely-typed arguments, validating each."""
        from triad_voicing.triads import coerce_root

        return cls(coerce_root(root), TriadQuality.parse(quality), Inversion.parse(inversion))

    @property
    def pitch_classes(self) -> tuple[PitchClass, PitchClass, PitchClass]:
        """Root, third and fifth, in that order."""
        from triad_voicing.triads import triad_pitch_classes

        return triad_pitch_classes(self.root, self.quality)

    @property
    def notes_in_order(self) -> tuple[PitchClass, PitchClass, PitchClass]:
        """Chord tones rotated so the intended bass comes first."""
        from triad_voicing.triads import rotate_for_inversion

        return rotate_for_inversion(self.pitch_classes, self.inversion)

    @property
    def bass(self) -> PitchClass:
        """The pitch class intended to sound lowest."""
        return self.notes_in_order[0]

    def __str__(self) -> str:
        from triad_voicing.converter import format_chord_name

        return format_chord_name(self.root, self.quality, self.inversion)


@dataclass(frozen=True)
class Tuning:
    """Open-string pitches of a six-string instrument.

    ``pitches[0]`` is the highest-pitched (treble) string and ``pitches[5]``
    the lowest-pitched (bass) string. Every fretboard lookup, validation
    and display in this package uses that order.

    Parameters
    ----------
    pitches : tuple[Pitch, ...]
        Exactly six open-string pitches, treble string first.

    Examples
    --------
    >>> tuning = Tuning.parse(["E4", "B3", "G3", "D3", "A2", "E2"])
    >>> tuning[5].name
    'E2'
    >>> Tuning.parse(["E", "B", "G", "D", "A", "D"])[5].name
    'D2'
    """

    pitches: tuple[Pitch, ...]

    def __post_init__(self) -> None:
        if len(self.pitches) != NUM_STRINGS or not all(isinstance(p, Pitch) for p in self.pitches):
            msg = f"A tuning needs exactly {NUM_STRINGS} open-string pitches, got {self.pitches!r}"
            raise InvalidTuningError(msg)

    @classmethod
    def parse(cls, entries: Sequence[Pitch | str]) -> Tuning:
        """Build a tuning from pitches, octave-qualified names or bare names.

        A bare name ("D") takes the octave that puts it nearest to the
        standard-tuning open string at the same index, resolving ties
        downward.
        """
        if isinstance(entries, str) or len(entries) != NUM_STRINGS:
            msg = f"A tuning needs exactly {NUM_STRINGS} strings, got {entries!r}"
            raise InvalidTuningError(msg)
        pitches = []
        for entry, reference in zip(entries, STANDARD_OPEN_VALUES):
            if isinstance(entry, Pitch):
                pitches.append(entry)
            elif isinstance(entry, str) and entry.strip()[-1:].isdigit():
                pitches.append(parse_pitch(entry))
            else:
                pitches.append(_nearest_pitch(pitch_class_index(entry), reference))
        return cls(tuple(pitches))

    def __getitem__(self, string: int) -> Pitch:
        return self.pitches[string]

    def __iter__(self) -> Iterator[Pitch]:
        return iter(self.pitches)

    def __len__(self) -> int:
        return len(self.pitches)

    def bass_to_treble(self) -> list[int]:
        """String indices from lowest to highest open pitch.

        For standard tuning this is ``[5, 4, 3, 2, 1, 0]``. Strings tuned to
        the same pitch keep the higher index first.
        """
        return sorted(range(NUM_STRINGS), key=lambda s: (self.pitches[s].value, -s))


def _nearest_pitch(index: int, reference: int) -> Pitch:
    """Place a pitch class at the octave nearest to a reference value."""
    below = reference - (reference - index) % 12
    above = below + 12
    return Pitch.from_value(below if reference - below <= above - reference else above)


@dataclass(frozen=True, order=True)
class FretPosition:
    """A location on the fretboard.

    Parameters
    ----------
    string : int
        String index (0 = treble string, 5 = bass string).
    fret : int
        Fret number (0 = open string, up to ``MAX_FRETS``).
    """

    string: int
    fret: int

    def __post_init__(self) -> None:
        if not isinstance(self.string, int) or not 0 <= self.string < NUM_STRINGS:
            msg = f"Invalid string index: {self.string!r}. Must be 0-{NUM_STRINGS - 1}."
            raise InvalidStringError(msg)
        if not isinstance(self.fret, int) or not 0 <= self.fret <= MAX_FRETS:
            msg = f"Invalid fret number: {self.fret!r}. Must be 0-{MAX_FRETS}."
            raise InvalidFretError(msg)

    def __str__(self) -> str:
        return f"S{self.string}F{self.fret}"


@dataclass(frozen=True)
class Voicing:
    """Three fretted notes on three distinct strings.

    Positions are stored sorted by string index. The tuning travels with
    the voicing so its pitches can be read without extra arguments.

    Parameters
    ----------
    positions : tuple[FretPosition, ...]
        Exactly three positions on distinct strings.
    tuning : Tuning
        The tuning the positions are played in.
    """

    positions: tuple[FretPosition, ...]
    tuning: Tuning

    def __post_init__(self) -> None:
        positions = tuple(sorted(self.positions))
        if len(positions) != 3 or len({p.string for p in positions}) != 3:
            msg = f"A voicing needs 3 positions on 3 distinct strings, got {positions!r}"
            raise InvalidArgumentError(msg)
        object.__setattr__(self, "positions", positions)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[int, int]], tuning: Tuning) -> Voicing:
        """Build a voicing from ``(string, fret)`` pairs."""
        return cls(tuple(FretPosition(s, f) for s, f in pairs), tuning)

    @property
    def pitches(self) -> tuple[Pitch, ...]:
        """Sounding pitch of each position, in string order."""
        return tuple(add_semitones(self.tuning[p.string], p.fret) for p in self.positions)

    @property
    def pitch_classes(self) -> tuple[PitchClass, ...]:
        return tuple(p.pitch_class for p in self.pitches)

    @property
    def note_names(self) -> tuple[str, ...]:
        return tuple(pc.name for pc in self.pitch_classes)

    def key(self) -> frozenset[FretPosition]:
        """Identity of the shape, independent of tuning."""
        return frozenset(self.positions)

    def __str__(self) -> str:
        return " ".join(f"{pos}:{pitch}" for pos, pitch in zip(self.positions, self.pitches))
