from sundial_designer.curves import AnalemmaPoint, generate_analemma
from sundial_designer.daterange import DateRange, resolve_day_range, split_by_day_range
from conftest import segment_days


def _points(days):
    return [AnalemmaPoint(day=d, x=float(d), y=0.0) for d in days]


def test_resolve_day_ranges():
    assert resolve_day_range(DateRange.FULL_YEAR) == [(1, 365)]
    assert resolve_day_range(DateRange.SUMMER_TO_WINTER) == [(172, 355)]
    assert resolve_day_range(DateRange.WINTER_TO_SUMMER) == [(355, 365), (1, 172)]


def test_winter_to_summer_partition_is_sorted():
    points = _points([360, 5, 200, 356, 1, 172, 355, 365, 171])
    first, second = split_by_day_range(points, DateRange.WINTER_TO_SUMMER)
    assert segment_days(first) == [355, 356, 360, 365]
    assert segment_days(second) == [1, 5, 171, 172]


def test_summer_to_winter_filters():
    points = _points([100, 172, 250, 355, 356])
    (only,) = split_by_day_range(points, DateRange.SUMMER_TO_WINTER)
    assert segment_days(only) == [172, 250, 355]


def test_empty_windows_keep_their_position():
    points = _points([10, 20])
    parts = split_by_day_range(points, DateRange.WINTER_TO_SUMMER)
    assert len(parts) == 2
    assert parts[0] == []
    assert segment_days(parts[1]) == [10, 20]


def test_winter_to_summer_on_real_analemma(fort_collins, horizontal_dial):
    curve = generate_analemma(fort_collins, horizontal_dial, 12.0)
    first, second = split_by_day_range(curve, DateRange.WINTER_TO_SUMMER)
    days1, days2 = segment_days(first), segment_days(second)
    assert days1 and days2
    assert all(d >= 355 for d in days1)
    assert all(d <= 172 for d in days2)
    assert days1 == sorted(days1)
    assert days2 == sorted(days2)
