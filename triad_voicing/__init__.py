"""Triad voicing engine for fretted-instrument practice.

This library provides the music-theory core of a triad practice tool:
pitch and triad arithmetic, tuning-aware fretboard mapping, and a
constrained search that finds playable, correctly inverted triad voicings.

Examples
--------
>>> from triad_voicing import find_voicing, triad_notes, format_chord_name

>>> triad_notes("C", "major")
['C', 'E', 'G']

>>> voicing = find_voicing("C", "major", "root")
>>> sorted(voicing.note_names)
['C', 'E', 'G']

>>> format_chord_name("A", "minor", "first")
'A Minor 1st inversion'

>>> # Lead-sheet and Harte notation
>>> from triad_voicing import Triad, to_pychord, to_harte
>>> to_pychord(Triad.of("A", "minor", "first"))
'Am/C'
>>> to_harte(Triad.of("A", "minor", "first"))
'A:min/b3'
"""

from triad_voicing.converter import (
    format_chord_name,
    from_harte,
    from_pychord,
    parse_chord_name,
    to_harte,
    to_pychord,
)
from triad_voicing.errors import (
    InvalidArgumentError,
    InvalidChordNameError,
    InvalidFretError,
    InvalidInversionError,
    InvalidNotationError,
    InvalidNoteNameError,
    InvalidOctaveRangeError,
    InvalidQualityError,
    InvalidRootError,
    InvalidStringError,
    InvalidTuningError,
)
from triad_voicing.fretboard import (
    NAMED_TUNINGS,
    STANDARD_TUNING,
    find_all_positions,
    fretboard_pitches,
    get_tuning,
    note_at,
    pitch_at,
)
from triad_voicing.identify import identify_notes, identify_voicing
from triad_voicing.models import (
    DEFAULT_NUM_FRETS,
    MAX_FRETS,
    NUM_STRINGS,
    FretPosition,
    Inversion,
    Triad,
    TriadQuality,
    Tuning,
    Voicing,
)
from triad_voicing.pitch import (
    Pitch,
    PitchClass,
    add_semitones,
    enharmonic_aliases,
    parse_pitch,
    pitch_class_index,
    pitch_class_name,
)
from triad_voicing.triads import rotate_for_inversion, triad_notes, triad_pitch_classes
from triad_voicing.voicing import (
    DEFAULT_SEARCH_CONFIG,
    SearchConfig,
    SearchOrder,
    find_voicing,
    find_voicings,
)

__all__ = [
    "DEFAULT_NUM_FRETS",
    "DEFAULT_SEARCH_CONFIG",
    "MAX_FRETS",
    "NAMED_TUNINGS",
    "NUM_STRINGS",
    "STANDARD_TUNING",
    "FretPosition",
    "InvalidArgumentError",
    "InvalidChordNameError",
    "InvalidFretError",
    "InvalidInversionError",
    "InvalidNotationError",
    "InvalidNoteNameError",
    "InvalidOctaveRangeError",
    "InvalidQualityError",
    "InvalidRootError",
    "InvalidStringError",
    "InvalidTuningError",
    "Inversion",
    "Pitch",
    "PitchClass",
    "SearchConfig",
    "SearchOrder",
    "Triad",
    "TriadQuality",
    "Tuning",
    "Voicing",
    "add_semitones",
    "enharmonic_aliases",
    "find_all_positions",
    "find_voicing",
    "find_voicings",
    "format_chord_name",
    "fretboard_pitches",
    "from_harte",
    "from_pychord",
    "get_tuning",
    "identify_notes",
    "identify_voicing",
    "note_at",
    "parse_chord_name",
    "parse_pitch",
    "pitch_at",
    "pitch_class_index",
    "pitch_class_name",
    "rotate_for_inversion",
    "to_harte",
    "to_pychord",
    "triad_notes",
    "triad_pitch_classes",
]
