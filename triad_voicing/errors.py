"""Exception types for invalid arguments.

Every error raised by this package derives from ``InvalidArgumentError``,
which itself is a ``ValueError``. A search that finds no playable voicing is
not an error: it returns ``None`` or an empty list instead.
"""


class InvalidArgumentError(ValueError):
    """Base class for malformed or out-of-range arguments."""


class InvalidNoteNameError(InvalidArgumentError):
    """A note name is not a recognised pitch-class spelling."""


class InvalidRootError(InvalidNoteNameError):
    """A chord root is not a recognised pitch-class spelling."""


class InvalidNotationError(InvalidArgumentError):
    """A pitch string is not in scientific pitch notation (e.g. "C#4")."""


class InvalidOctaveRangeError(InvalidArgumentError):
    """An octave lies outside the supported 0-9 range."""


class InvalidQualityError(InvalidArgumentError):
    """A chord quality is unknown or is not a triad quality."""


class InvalidInversionError(InvalidArgumentError):
    """An inversion is not root, first or second."""


class InvalidStringError(InvalidArgumentError):
    """A string index lies outside 0-5."""


class InvalidFretError(InvalidArgumentError):
    """A fret number lies outside the playable range."""


class InvalidTuningError(InvalidArgumentError):
    """A tuning is malformed or unknown."""


class InvalidChordNameError(InvalidArgumentError):
    """A chord name or symbol cannot be parsed into a triad."""
