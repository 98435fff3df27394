import io
import sys

import pytest

from algokit.problems import (
    kth_smallest_in_ranges,
    largest_minimum_distance,
    main,
    merge_ranges,
    soldiers_beaten,
)


def test_soldiers_beaten_example():
    assert soldiers_beaten([1, 2, 3, 4, 5, 6, 7], 3) == (3, 6)


def test_soldiers_beaten_none_when_weaker_than_all():
    assert soldiers_beaten([4, 5, 6], 3) == (0, 0)


def test_soldiers_beaten_all_when_stronger_than_all():
    powers = [9, 2, 7, 2]
    assert soldiers_beaten(powers, 9) == (len(powers), sum(powers))


def test_soldiers_beaten_is_monotonic():
    powers = [5, 1, 8, 3, 3, 10]
    results = [soldiers_beaten(powers, s) for s in range(12)]
    for before, after in zip(results, results[1:]):
        assert before[0] <= after[0]
        assert before[1] <= after[1]


def test_merge_ranges_overlap():
    assert merge_ranges([(3, 8), (1, 5)]) == [(1, 8)]


def test_merge_ranges_keeps_adjacent_separate():
    ranges = [(1, 2), (3, 4)]
    assert merge_ranges(ranges) == ranges


def test_merge_ranges_contained():
    assert merge_ranges([(1, 10), (2, 3)]) == [(1, 10)]


def test_merge_ranges_result_is_disjoint_and_sorted():
    merged = merge_ranges([(5, 9), (1, 2), (8, 12), (2, 4), (20, 21)])
    for (_, high), (low, _) in zip(merged, merged[1:]):
        assert high < low


def test_merge_ranges_empty():
    assert merge_ranges([]) == []


def test_kth_smallest_enumerates_covered_numbers():
    ranges = [(10, 12), (1, 3)]
    assert [kth_smallest_in_ranges(ranges, k) for k in range(1, 7)] == [
        1, 2, 3, 10, 11, 12,
    ]


def test_kth_smallest_first_is_lowest_start():
    assert kth_smallest_in_ranges([(7, 9), (4, 5)], 1) == 4


def test_kth_smallest_beyond_coverage():
    assert kth_smallest_in_ranges([(1, 3)], 4) == -1


def test_kth_smallest_rejects_nonpositive_k():
    with pytest.raises(ValueError):
        kth_smallest_in_ranges([(1, 3)], 0)


def test_largest_minimum_distance_example():
    assert largest_minimum_distance([1, 2, 8, 4, 9], 3) == 3


def test_largest_minimum_distance_two_cows_uses_extremes():
    stalls = [13, 4, 7, 30]
    assert largest_minimum_distance(stalls, 2) == max(stalls) - min(stalls)


def test_largest_minimum_distance_single_cow_hits_search_limit():
    assert largest_minimum_distance([5, 6], 1) == 10**9


def test_largest_minimum_distance_too_many_cows():
    assert largest_minimum_distance([1, 2, 3], 4) == 0


def test_largest_minimum_distance_needs_stalls():
    with pytest.raises(ValueError):
        largest_minimum_distance([], 2)


def _run(monkeypatch, capsys, argv, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    code = main(argv)
    return code, capsys.readouterr().out


def test_main_soldiers(monkeypatch, capsys):
    powers = [1, 2, 3, 4, 5, 6, 7]
    code, out = _run(monkeypatch, capsys, ["soldiers"], "7\n1 2 3 4 5 6 7\n2\n3\n10\n")
    assert code == 0
    expected = [soldiers_beaten(powers, 3), soldiers_beaten(powers, 10)]
    assert out.split("\n")[:-1] == [f"{a} {b}" for a, b in expected]


def test_main_kth(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, ["kth"], "1\n2 3\n1 3\n10 12\n1\n4\n7\n")
    assert code == 0
    ranges = [(1, 3), (10, 12)]
    assert out.split() == [str(kth_smallest_in_ranges(ranges, k)) for k in (1, 4, 7)]


def test_main_cows(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, ["cows"], "1\n5 3\n1\n2\n8\n4\n9\n")
    assert code == 0
    assert out == "3\n"


def test_main_reports_truncated_input(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\n5 3\n1 2\n"))
    with pytest.raises(SystemExit) as info:
        main(["cows"])
    assert info.value.code == 2