import pytest

from gitness import has_peak, has_trough, trough_time


def test_peak_strictly_above_threshold():
    assert has_peak([0, 1, 3, 1, 0], 2)
    assert not has_peak([0, 1, 3, 1, 0], 3)


def test_trough_time_returns_timestamp():
    entries = [(5, 10.0), (1, 10.5), (4, 11.0)]
    assert trough_time(entries, 2) == 10.5


def test_trough_time_first_qualifying_index():
    entries = [(0, 0.0), (-3, 1.0), (0, 2.0), (-5, 3.0), (0, 4.0)]
    assert trough_time(entries, -2) == 1.0


def test_trough_must_be_below_threshold():
    assert trough_time([(5, 0.0), (1, 1.0), (4, 2.0)], 1) is None


def test_plateau_is_not_a_peak():
    assert not has_peak([0, 3, 3, 0], -10)
    assert trough_time([(0, 0.0), (-3, 1.0), (-3, 2.0), (0, 3.0)], 10) is None


@pytest.mark.parametrize("series", [
    [1, 2, 3, 4, 5, 6],
    [9, 7, 2, 0, -4],
    [-1.0, -0.5, 0.25, 8.0],
])
@pytest.mark.parametrize("threshold", [-100, 0, 100])
def test_monotonic_series_has_no_features(series, threshold):
    assert not has_peak(series, threshold)
    assert trough_time([(v, float(i)) for i, v in enumerate(series)], threshold) is None
    assert not has_trough(series, threshold)


@pytest.mark.parametrize("n", [0, 1, 2])
def test_short_series_yield_no_feature(n):
    series = [5.0, -5.0][:n]
    assert not has_peak(series, -100)
    assert trough_time([(v, 0.0) for v in series], 100) is None


def test_has_trough():
    assert has_trough([0, -3, 0], -1)
    assert not has_trough([0, -3, 0], -3)
