import pytest

from triad_voicing import STANDARD_TUNING, Inversion, SearchConfig, Triad, Tuning, Voicing
from triad_voicing.voicing import (
    actual_bass_note,
    fret_span,
    has_unique_correct_notes,
    is_valid_voicing,
    matches_inversion,
    pitch_span,
    rank_voicings,
    score_voicing,
    span_metric,
    string_span,
    validate_voicing,
)

C_MAJOR = Triad.of("C", "major")

# Open C shape: C3 E3 G3 on the A, D and G strings
OPEN_C = Voicing.from_pairs([(4, 3), (3, 2), (2, 0)], STANDARD_TUNING)


def codes(voicing, triad, config=None):
    errors = validate_voicing(voicing, triad) if config is None else validate_voicing(voicing, triad, config)
    return [e.code for e in errors]


class TestMeasures:
    def test_spans(self):
        assert fret_span(OPEN_C) == 3
        assert pitch_span(OPEN_C) == 7
        assert string_span(OPEN_C) == 2

    def test_open_string_counts_in_fret_span(self):
        voicing = Voicing.from_pairs([(2, 0), (1, 0), (0, 0)], STANDARD_TUNING)
        assert fret_span(voicing) == 0

    def test_actual_bass_is_lowest_pitch(self):
        assert actual_bass_note(OPEN_C).name == "C"

    def test_actual_bass_ignores_string_index(self):
        # Low E on index 0, high E on index 5
        reversed_tuning = Tuning.parse(["E2", "A2", "D3", "G3", "B3", "E4"])
        voicing = Voicing.from_pairs([(0, 8), (1, 7), (2, 5)], reversed_tuning)
        assert actual_bass_note(voicing).name == "C"
        assert matches_inversion(voicing, C_MAJOR)


class TestPredicates:
    def test_correct_notes(self):
        assert has_unique_correct_notes(OPEN_C, C_MAJOR)

    def test_wrong_note(self):
        voicing = Voicing.from_pairs([(4, 3), (3, 2), (2, 2)], STANDARD_TUNING)
        assert not has_unique_correct_notes(voicing, C_MAJOR)

    def test_doubled_note(self):
        # C3 E3 C4
        voicing = Voicing.from_pairs([(4, 3), (3, 2), (2, 5)], STANDARD_TUNING)
        assert not has_unique_correct_notes(voicing, C_MAJOR)

    @pytest.mark.parametrize(
        ("inversion", "expected"),
        [(Inversion.ROOT, True), (Inversion.FIRST, False), ("second", False)],
    )
    def test_matches_inversion_override(self, inversion, expected):
        assert matches_inversion(OPEN_C, C_MAJOR, inversion) is expected


class TestValidateVoicing:
    def test_valid(self):
        assert validate_voicing(OPEN_C, C_MAJOR) == []
        assert is_valid_voicing(OPEN_C, C_MAJOR)

    def test_wrong_notes(self):
        voicing = Voicing.from_pairs([(4, 3), (3, 2), (2, 2)], STANDARD_TUNING)
        assert "NOTES" in codes(voicing, C_MAJOR)

    def test_fret_span_only(self):
        # C4 on the D string, E4 on the B string, G4 on the G string
        voicing = Voicing.from_pairs([(3, 10), (1, 5), (2, 12)], STANDARD_TUNING)
        assert codes(voicing, C_MAJOR) == ["FRET_SPAN"]

    def test_pitch_span(self):
        # C3, G3, E4
        voicing = Voicing.from_pairs([(4, 3), (3, 5), (2, 9)], STANDARD_TUNING)
        assert "PITCH_SPAN" in codes(voicing, C_MAJOR)

    def test_string_span(self):
        voicing = Voicing.from_pairs([(5, 8), (3, 2), (2, 0)], STANDARD_TUNING)
        assert "STRING_SPAN" in codes(voicing, C_MAJOR)

    def test_wrong_inversion(self):
        assert codes(OPEN_C, Triad.of("C", "major", "first")) == ["INVERSION"]

    def test_custom_limits(self):
        config = SearchConfig(fret_span_limit=2)
        assert codes(OPEN_C, C_MAJOR, config) == ["FRET_SPAN"]
        assert not is_valid_voicing(OPEN_C, C_MAJOR, config)

    def test_messages_are_readable(self):
        errors = validate_voicing(OPEN_C, Triad.of("C", "major", "first"))
        assert "E" in errors[0].message


class TestScoring:
    def test_root_position_with_root_in_bass(self):
        assert score_voicing(OPEN_C, C_MAJOR) == 103

    def test_inversion_match(self):
        # E3 G3 C4
        voicing = Voicing.from_pairs([(4, 7), (3, 5), (2, 5)], STANDARD_TUNING)
        assert score_voicing(voicing, Triad.of("C", "major", "first")) == 101

    def test_no_match(self):
        assert score_voicing(OPEN_C, Triad.of("C", "major", "first")) == 1

    def test_span_metric(self):
        assert span_metric(OPEN_C) == 72

    def test_rank_prefers_closed(self):
        wide = Voicing.from_pairs([(5, 8), (3, 2), (2, 0)], STANDARD_TUNING)
        ranked = rank_voicings([wide, OPEN_C], C_MAJOR)
        assert [s.voicing for s in ranked] == [OPEN_C, wide]
        assert ranked[0].span < ranked[1].span

    def test_rank_is_stable_on_ties(self):
        other = Voicing.from_pairs([(5, 8), (4, 7), (3, 5)], STANDARD_TUNING)
        ranked = rank_voicings([other, OPEN_C], C_MAJOR)
        assert [s.voicing for s in ranked] == [other, OPEN_C]

    def test_scored_fields(self):
        ranked = rank_voicings([OPEN_C], C_MAJOR)
        assert ranked[0].score == 103
        assert ranked[0].span == 72

    def test_rank_score_breaks_span_ties(self):
        # Augmented triads give every inversion the same close span
        c_aug_first = Triad.of("C", "augmented", "first")
        c_bass = Voicing.from_pairs([(4, 3), (3, 2), (2, 1)], STANDARD_TUNING)  # C3 E3 G#3
        e_bass = Voicing.from_pairs([(4, 7), (3, 6), (2, 5)], STANDARD_TUNING)  # E3 G#3 C4
        assert span_metric(c_bass) == span_metric(e_bass) == 82

        ranked = rank_voicings([c_bass, e_bass], c_aug_first)
        assert [s.voicing for s in ranked] == [e_bass, c_bass]
        assert [s.score for s in ranked] == [101, 1]
