import math

import pytest

from voiceprint.matching import (
    Match,
    cosine_similarity,
    euclidean_distance,
    format_feature,
    parse_feature,
    rank_matches,
)


def test_cosine_of_vector_with_itself():
    v = [0.3, -1.2, 4.0, 2.5]
    assert cosine_similarity(v, v) == pytest.approx(1.0)


def test_cosine_is_symmetric_and_scale_invariant():
    a = [1.0, 2.0, -3.0]
    b = [0.5, -1.0, 2.0]
    assert cosine_similarity(a, b) == pytest.approx(cosine_similarity(b, a))
    assert cosine_similarity([3 * x for x in a], b) == pytest.approx(cosine_similarity(a, b))
    assert -1.0 <= cosine_similarity(a, b) <= 1.0


def test_cosine_of_opposite_vectors():
    a = [1.0, 2.0, 3.0]
    assert cosine_similarity(a, [-x for x in a]) == pytest.approx(-1.0)


def test_cosine_errors():
    with pytest.raises(ValueError):
        cosine_similarity([0.0, 0.0], [1.0, 1.0])
    with pytest.raises(ValueError):
        cosine_similarity([1.0], [1.0, 2.0])


def test_euclidean_properties():
    a, b, c = [1.0, 2.0, 3.0], [4.0, -1.0, 0.5], [0.0, 0.0, 7.0]
    assert euclidean_distance(a, a) == 0.0
    assert euclidean_distance(a, b) == pytest.approx(euclidean_distance(b, a))
    assert euclidean_distance(a, c) <= euclidean_distance(a, b) + euclidean_distance(b, c)


def test_euclidean_length_mismatch():
    with pytest.raises(ValueError):
        euclidean_distance([1.0], [])


def test_format_uses_printf_style():
    assert format_feature([1.5, 2.0]) == "1.500000, 2.000000, "


def test_format_breaks_lines_every_eight_values():
    text = format_feature([float(i) for i in range(17)])
    lines = text.split("\r\n")
    assert [line.count(",") for line in lines] == [8, 8, 1]


def test_format_writes_nan_as_zero():
    assert format_feature([math.nan]) == format_feature([0.0])


def test_parse_round_trip():
    vector = [0.123456, -7.5, 1000.25, 0.0] * 5
    assert parse_feature(format_feature(vector), len(vector)) == pytest.approx(vector, abs=1e-6)


def test_parse_stops_at_dimension():
    vector = [1.0, 2.0, 3.0, 4.0]
    assert parse_feature(format_feature(vector), 2) == [1.0, 2.0]


def test_parse_reads_number_prefix_and_junk():
    assert parse_feature("2.5abc, xyz, -1e2", 3) == [2.5, 0.0, -100.0]


def test_parse_ignores_text_after_nul():
    assert parse_feature("1.0, 2.0,\0 3.0,", 5) == [1.0, 2.0]


def test_parse_rejects_bad_dimension():
    with pytest.raises(ValueError):
        parse_feature("1.0,", 0)


def test_rank_matches_orders_best_and_worst():
    distances = [(0.1 * i, float(i)) for i in range(1, 15)]
    ranked = rank_matches(distances, 6)
    assert len(ranked) == 6
    best = [m.cosine for m in ranked[:3]]
    worst = [m.cosine for m in ranked[3:]]
    assert best == sorted(best, reverse=True)
    assert best[0] == max(c for c, _ in distances)
    assert worst[-1] == min(c for c, _ in distances)
    for match in ranked:
        assert distances[match.index - 1] == (match.cosine, match.distance)


def test_rank_matches_pads_with_zero_entries():
    ranked = rank_matches([(0.9, 1.0), (0.5, 2.0)], 4)
    assert ranked[0] == Match(1, 0.9, 1.0)
    assert ranked[1] == Match(2, 0.5, 2.0)
    assert all(m.cosine == 0.0 and m.index > 2 for m in ranked[2:])


def test_rank_matches_rejects_bad_count():
    with pytest.raises(ValueError):
        rank_matches([(0.5, 1.0)], 0)