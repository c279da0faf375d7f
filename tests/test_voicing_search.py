import logging

import pytest

from triad_voicing import (
    NAMED_TUNINGS,
    STANDARD_TUNING,
    InvalidArgumentError,
    InvalidFretError,
    InvalidInversionError,
    InvalidQualityError,
    InvalidRootError,
    InvalidTuningError,
    Inversion,
    PitchClass,
    SearchConfig,
    SearchOrder,
    Triad,
    TriadQuality,
    Tuning,
    find_voicing,
    find_voicings,
)
from triad_voicing.voicing import (
    actual_bass_note,
    fret_span,
    is_valid_voicing,
    nearby_strings,
    pitch_span,
    search_voicings,
    span_metric,
    string_span,
)

ALL_TRIADS = [
    (PitchClass(root), quality, inversion)
    for root in range(12)
    for quality in TriadQuality
    for inversion in Inversion
]


def pairs(voicing):
    return [(p.string, p.fret) for p in voicing.positions]


class TestNearbyStrings:
    @pytest.mark.parametrize(
        ("center", "window", "expected"),
        [
            (5, 3, [4, 3, 2]),
            (4, 3, [3, 5, 2, 1]),
            (3, 3, [2, 4, 1, 5, 0]),
            (2, 1, [1, 3]),
            (0, 0, []),
        ],
    )
    def test_nearest_first(self, center, window, expected):
        assert nearby_strings(center, window) == expected


class TestFindVoicing:
    def test_c_major_root_position(self):
        voicing = find_voicing("C", "major", "root")
        assert pairs(voicing) == [(3, 5), (4, 7), (5, 8)]
        assert str(voicing) == "S3F5:G3 S4F7:E3 S5F8:C3"

    def test_b_diminished(self):
        voicing = find_voicing("B", "diminished")
        assert pairs(voicing) == [(3, 3), (4, 5), (5, 7)]
        assert sorted(voicing.note_names) == ["B", "D", "F"]
        assert actual_bass_note(voicing).name == "B"

    def test_a_minor_first_inversion(self):
        voicing = find_voicing("A", "minor", "first")
        assert set(voicing.note_names) == {"A", "C", "E"}
        assert actual_bass_note(voicing).name == "C"

    def test_enharmonic_roots_agree(self):
        assert find_voicing("Db", "major") == find_voicing("C#", "major")

    def test_no_voicing_returns_none(self):
        assert find_voicing("C", "major", max_fret=0) is None


class TestFindVoicings:
    def test_c_major_first_three(self):
        voicings = find_voicings("C", "major", "root", count=3)
        assert [pairs(v) for v in voicings] == [
            [(3, 5), (4, 7), (5, 8)],
            [(2, 0), (3, 2), (4, 3)],
            [(1, 8), (2, 9), (3, 10)],
        ]

    def test_fewer_than_requested(self):
        voicings = find_voicings("C", "major", "root", count=10)
        assert len(voicings) == 4

    def test_open_strings_only(self):
        voicings = find_voicings("E", "minor", "first", max_fret=0)
        assert [pairs(v) for v in voicings] == [[(0, 0), (1, 0), (2, 0)]]

    def test_none_within_range(self):
        assert find_voicings("C", "major", max_fret=0) == []

    def test_distinct(self):
        voicings = find_voicings("G", "major", count=10)
        keys = [v.key() for v in voicings]
        assert len(keys) == len(set(keys))

    def test_ranked_most_closed_first(self):
        voicings = find_voicings("F#", "minor", "second", count=10)
        spans = [span_metric(v) for v in voicings]
        assert spans == sorted(spans)

    def test_tuning_as_note_names(self):
        by_names = find_voicings("D", "major", tuning=["E", "B", "G", "D", "A", "E"])
        assert by_names == find_voicings("D", "major")

    def test_tuning_by_name(self):
        voicings = find_voicings("D", "major", tuning="Drop D", count=5)
        assert voicings
        assert all(v.tuning == NAMED_TUNINGS["Drop D"] for v in voicings)

    def test_max_attempts_caps_results(self):
        voicings = find_voicings("C", "major", count=3, config=SearchConfig(max_attempts=1))
        assert len(voicings) == 1


class TestVoicingProperties:
    @pytest.mark.parametrize(("root", "quality", "inversion"), ALL_TRIADS)
    def test_every_result_is_valid(self, root, quality, inversion):
        triad = Triad(root, quality, inversion)
        for voicing in find_voicings(root, quality, inversion, count=3):
            assert is_valid_voicing(voicing, triad)
            assert len({p.string for p in voicing.positions}) == 3
            assert set(voicing.pitch_classes) == set(triad.pitch_classes)
            assert actual_bass_note(voicing) == triad.bass
            assert fret_span(voicing) <= 5
            assert pitch_span(voicing) <= 15
            assert string_span(voicing) <= 2
            assert all(0 <= p.fret <= 12 for p in voicing.positions)

    @pytest.mark.parametrize("name", list(NAMED_TUNINGS))
    @pytest.mark.parametrize("inversion", list(Inversion))
    def test_named_tunings(self, name, inversion):
        triad = Triad.of("G", "major", inversion)
        for voicing in find_voicings("G", "major", inversion, tuning=name, count=5):
            assert is_valid_voicing(voicing, triad)

    def test_bass_decided_by_pitch_not_string(self):
        # Low E on index 0, high E on index 5
        reversed_tuning = Tuning.parse(["E2", "A2", "D3", "G3", "B3", "E4"])
        voicings = find_voicings("C", "major", "first", tuning=reversed_tuning, count=5)
        assert voicings
        for voicing in voicings:
            assert actual_bass_note(voicing).name == "E"

    def test_higher_fret_limit(self):
        voicings = find_voicings("C", "major", max_fret=24, count=20)
        assert len(voicings) > 4
        assert all(p.fret <= 24 for v in voicings for p in v.positions)


class TestSearchOrder:
    def test_fixed_is_deterministic(self):
        assert find_voicings("E", "minor", count=5) == find_voicings("E", "minor", count=5)

    def test_seeded_shuffle_is_reproducible(self):
        config = SearchConfig(order=SearchOrder.SHUFFLED, seed=7)
        first = find_voicings("A", "major", "second", count=4, config=config)
        second = find_voicings("A", "major", "second", count=4, config=config)
        assert first == second

    def test_shuffle_finds_same_candidates(self):
        config = SearchConfig(order=SearchOrder.SHUFFLED, seed=11)
        fixed = find_voicings("C", "major", count=10)
        shuffled = find_voicings("C", "major", count=10, config=config)
        assert {v.key() for v in shuffled} == {v.key() for v in fixed}

    def test_order_from_string(self):
        assert SearchConfig(order="shuffled").order is SearchOrder.SHUFFLED


class TestSearchVoicings:
    def test_scores_attached(self):
        scored = search_voicings(Triad.of("C", "major"), STANDARD_TUNING, 12, 3)
        assert [s.score for s in scored] == [103, 103, 103]
        assert [s.span for s in scored] == [72, 72, 72]

    def test_logs_summary(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="triad_voicing.voicing.search"):
            search_voicings(Triad.of("C", "major"), STANDARD_TUNING, 0, 3)
        assert "No voicing found for C Major" in caplog.text


class TestInvalidArguments:
    def test_tuning_above_highest_pitch(self):
        high = Tuning.parse(["E9", "B8", "G8", "D8", "A7", "E7"])
        with pytest.raises(InvalidFretError, match="above B9"):
            find_voicings("E", "major", tuning=high, max_fret=24, count=50)

    def test_high_tuning_within_range(self):
        high = Tuning.parse(["E9", "B8", "G8", "D8", "A7", "E7"])
        triad = Triad.of("E", "major")
        for voicing in find_voicings("E", "major", tuning=high, max_fret=7, count=50):
            assert is_valid_voicing(voicing, triad)

    def test_bad_root(self):
        with pytest.raises(InvalidRootError):
            find_voicings("H", "major")

    def test_bad_quality(self):
        with pytest.raises(InvalidQualityError):
            find_voicings("C", "sus4")

    def test_bad_inversion(self):
        with pytest.raises(InvalidInversionError):
            find_voicing("C", "major", "third")

    def test_bad_tuning_name(self):
        with pytest.raises(InvalidTuningError):
            find_voicings("C", "major", tuning="Nashville")

    def test_bad_tuning_length(self):
        with pytest.raises(InvalidTuningError):
            find_voicings("C", "major", tuning=["E", "A", "D", "G"])

    @pytest.mark.parametrize("max_fret", [-1, 25, True])
    def test_bad_max_fret(self, max_fret):
        with pytest.raises(InvalidFretError):
            find_voicings("C", "major", max_fret=max_fret)

    @pytest.mark.parametrize("count", [0, -3, 1.5])
    def test_bad_count(self, count):
        with pytest.raises(InvalidArgumentError, match="count"):
            find_voicings("C", "major", count=count)

    @pytest.mark.parametrize(
        "kwargs",
        [{"fret_span_limit": -1}, {"max_attempts": 0}, {"single_result_pool": 0}, {"order": "sideways"}],
    )
    def test_bad_config(self, kwargs):
        with pytest.raises(InvalidArgumentError):
            SearchConfig(**kwargs)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            find_voicings("C", "major", count=0)
