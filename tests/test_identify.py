import pytest

from triad_voicing import (
    STANDARD_TUNING,
    InvalidArgumentError,
    Inversion,
    Triad,
    TriadQuality,
    Voicing,
    find_voicings,
    identify_notes,
    identify_voicing,
)


class TestIdentifyNotes:
    @pytest.mark.parametrize(
        ("notes", "expected"),
        [
            (["C", "E", "G"], "C Major"),
            (["A", "C", "E"], "A Minor"),
            (["D", "F", "B"], "B Diminished 1st inversion"),
            (["Gb", "Bb", "Db"], "F# Major"),
            (["E", "G", "C"], "C Major 1st inversion"),
        ],
    )
    def test_single_match(self, notes, expected):
        assert [str(t) for t in identify_notes(notes)] == [expected]

    def test_explicit_bass(self):
        triads = identify_notes(["C", "E", "G"], bass="G")
        assert triads == [Triad.of("C", "major", "second")]

    def test_augmented_is_symmetric(self):
        triads = identify_notes(["C", "E", "G#"])
        assert [t.root.name for t in triads] == ["C", "E", "G#"]
        assert all(t.quality is TriadQuality.AUGMENTED for t in triads)
        assert [t.inversion for t in triads] == [Inversion.ROOT, Inversion.SECOND, Inversion.FIRST]

    def test_not_a_triad(self):
        assert identify_notes(["C", "D", "E"]) == []

    def test_duplicate_notes_raise(self):
        with pytest.raises(InvalidArgumentError, match="3 distinct notes"):
            identify_notes(["C", "E", "C"])

    def test_enharmonic_duplicates_raise(self):
        with pytest.raises(InvalidArgumentError):
            identify_notes(["C#", "Db", "F"])

    def test_foreign_bass_raises(self):
        with pytest.raises(InvalidArgumentError, match="not one of the given notes"):
            identify_notes(["C", "E", "G"], bass="D")


class TestIdentifyVoicing:
    def test_open_c(self):
        voicing = Voicing.from_pairs([(4, 3), (3, 2), (2, 0)], STANDARD_TUNING)
        assert identify_voicing(voicing) == [Triad.of("C", "major")]

    @pytest.mark.parametrize(
        "triad",
        [
            Triad.of("C", "major", "first"),
            Triad.of("F#", "minor", "second"),
            Triad.of("Bb", "diminished", "root"),
        ],
    )
    def test_identifies_search_results(self, triad):
        for voicing in find_voicings(triad.root, triad.quality, triad.inversion, count=3):
            assert identify_voicing(voicing) == [triad]
