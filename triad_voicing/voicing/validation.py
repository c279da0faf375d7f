"""Validation predicates for triad voicings.

These are the constraints the search engine enforces, exposed as pure
functions so a voicing from any source can be checked independently.
"""

from __future__ import annotations

from dataclasses import dataclass

from triad_voicing.models import Inversion, Triad, Voicing
from triad_voicing.pitch import PitchClass
from triad_voicing.triads import rotate_for_inversion
from triad_voicing.voicing.config import DEFAULT_SEARCH_CONFIG, SearchConfig


@dataclass(frozen=True)
class ValidationError:
    """A constraint a voicing fails.

    Parameters
    ----------
    code : str
        Constraint identifier: "NOTES", "FRET_SPAN", "PITCH_SPAN",
        "STRING_SPAN" or "INVERSION".
    message : str
        Human-readable description of the failure.
    """

    code: str
    message: str


def has_unique_correct_notes(voicing: Voicing, triad: Triad) -> bool:
    """Check that the voicing sounds exactly the triad's three pitch classes.

    Examples
    --------
    >>> from triad_voicing.fretboard import STANDARD_TUNING
    >>> v = Voicing.from_pairs([(4, 3), (3, 2), (2, 0)], STANDARD_TUNING)
    >>> has_unique_correct_notes(v, Triad.of("C", "major"))
    True
    """
    pitch_classes = voicing.pitch_classes
    return len(set(pitch_classes)) == 3 and set(pitch_classes) == set(triad.pitch_classes)


def fret_span(voicing: Voicing) -> int:
    """Distance between the lowest and highest fret, open strings included."""
    frets = [p.fret for p in voicing.positions]
    return max(frets) - min(frets)


def pitch_span(voicing: Voicing) -> int:
    """Semitones between the lowest and highest sounding note."""
    values = [p.value for p in voicing.pitches]
    return max(values) - min(values)


def string_span(voicing: Voicing) -> int:
    """Distance between the outermost string indices."""
    strings = [p.string for p in voicing.positions]
    return max(strings) - min(strings)


def actual_bass_note(voicing: Voicing) -> PitchClass:
    """Pitch class of the lowest sounding note.

    This is decided by absolute pitch, not by string index: in alternate
    tunings a higher-indexed string is not guaranteed to sound lower.
    """
    return min(voicing.pitches).pitch_class


def matches_inversion(voicing: Voicing, triad: Triad, inversion: Inversion | int | str | None = None) -> bool:
    """Check that the lowest note is the bass the inversion calls for.

    Parameters
    ----------
    voicing : Voicing
        The voicing to check.
    triad : Triad
        The intended triad.
    inversion : Inversion | int | str | None
        Inversion to check against; defaults to ``triad.inversion``.
    """
    if inversion is None:
        inversion = triad.inversion
    expected = rotate_for_inversion(triad.pitch_classes, inversion)[0]
    return actual_bass_note(voicing) == expected


def validate_voicing(
    voicing: Voicing,
    triad: Triad,
    config: SearchConfig = DEFAULT_SEARCH_CONFIG,
) -> list[ValidationError]:
    """Check a voicing against every constraint.

    Returns
    -------
    list[ValidationError]
        Empty if the voicing is valid.
    """
    errors: list[ValidationError] = []

    if not has_unique_correct_notes(voicing, triad):
        expected = ", ".join(pc.name for pc in triad.pitch_classes)
        errors.append(ValidationError(
            code="NOTES",
            message=f"Notes {', '.join(voicing.note_names)} are not exactly {expected}",
        ))

    span = fret_span(voicing)
    if span > config.fret_span_limit:
        errors.append(ValidationError(
            code="FRET_SPAN",
            message=f"Fret span {span} exceeds {config.fret_span_limit}",
        ))

    span = pitch_span(voicing)
    if span > config.pitch_span_limit:
        errors.append(ValidationError(
            code="PITCH_SPAN",
            message=f"Pitch span {span} semitones exceeds {config.pitch_span_limit}",
        ))

    span = string_span(voicing)
    if span > config.string_span_limit:
        errors.append(ValidationError(
            code="STRING_SPAN",
            message=f"String span {span} exceeds {config.string_span_limit}",
        ))

    if not matches_inversion(voicing, triad):
        errors.append(ValidationError(
            code="INVERSION",
            message=f"Bass note {actual_bass_note(voicing).name} does not match "
            f"{triad.inversion.label.lower()} bass {triad.bass.name}",
        ))

    return errors


def is_valid_voicing(
    voicing: Voicing,
    triad: Triad,
    config: SearchConfig = DEFAULT_SEARCH_CONFIG,
) -> bool:
    """Return True if the voicing passes every constraint."""
    return not validate_voicing(voicing, triad, config)
