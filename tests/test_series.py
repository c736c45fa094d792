import random
from datetime import timedelta

import pytest

from mockfin.series import synthesize_series, series_length, TIMEFRAMES

EXPECTED_LENGTHS = {"1d": 78, "5d": 39, "1m": 22, "3m": 66, "1y": 52}


@pytest.mark.parametrize("timeframe,count", EXPECTED_LENGTHS.items())
def test_length_per_timeframe(timeframe, count, rng):
    assert series_length(timeframe) == count
    assert len(synthesize_series("AAPL", timeframe, rng)) == count


@pytest.mark.parametrize("symbol", ["AAPL", "BTC-USD", "UNKNOWN", "XRP-USD"])
@pytest.mark.parametrize("timeframe", EXPECTED_LENGTHS)
def test_ohlc_bounds(symbol, timeframe):
    for seed in range(20):
        for point in synthesize_series(symbol, timeframe, random.Random(seed)):
            assert point.low <= min(point.open, point.close)
            assert point.high >= max(point.open, point.close)
            assert point.low > 0


@pytest.mark.parametrize("timeframe", EXPECTED_LENGTHS)
def test_dates_strictly_ascending(timeframe, rng, now):
    points = synthesize_series("MSFT", timeframe, rng, now=now)
    dates = [p.date for p in points]
    assert all(a < b for a, b in zip(dates, dates[1:]))
    assert len(set(dates)) == len(dates)
    interval = TIMEFRAMES[timeframe][1]
    assert dates[-1] == now - interval
    assert dates[1] - dates[0] == interval


def test_walk_is_continuous(rng):
    points = synthesize_series("TSLA", "3m", rng)
    assert points[0].open == 240.0
    for prev, cur in zip(points, points[1:]):
        assert cur.open == prev.close


def test_volatility_by_symbol_class(rng):
    for point in synthesize_series("NVDA", "1y", rng):
        assert abs(point.close / point.open - 1) <= 0.01 + 1e-12
        assert 2_500_000 <= point.volume <= 82_500_000
    for point in synthesize_series("ETH-USD", "1y", rng):
        assert abs(point.close / point.open - 1) <= 0.02 + 1e-12
        assert point.volume >= 500_000_000


def test_each_call_restarts_from_base_price():
    first = synthesize_series("AAPL", "1m", random.Random(1))
    second = synthesize_series("AAPL", "1m", random.Random(2))
    assert first[0].open == second[0].open == 175.0
