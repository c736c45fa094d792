import random

import pytest
from pydantic import ValidationError

from mockfin.analysis import compose_analysis, compose_ticker_analysis, format_sector, price_levels
from mockfin.schemas import AnalysisRequest

SEEDS = range(100)
KINDS = ["technical", "fundamental", "sentiment", "comprehensive"]
SECTIONS = {
    "technical": {"technical_indicators"},
    "fundamental": {"fundamental_metrics"},
    "sentiment": {"sentiment_analysis"},
    "comprehensive": {"technical_indicators", "fundamental_metrics", "sentiment_analysis"},
}


def _request(subject, kind, **extra):
    return AnalysisRequest(subject_kind=subject, analysis_kind=kind, timeframe="1m", **extra)


ALL_SUBJECTS = [
    ("ticker", {"ticker": "AAPL"}),
    ("ticker", {"ticker": "NOPE"}),
    ("sector", {"sector": "technology"}),
    ("sector", {"sector": "consumer-staples"}),
    ("portfolio", {}),
    ("market", {}),
]


@pytest.mark.parametrize("subject,extra", ALL_SUBJECTS)
@pytest.mark.parametrize("kind", KINDS)
def test_section_gating(subject, extra, kind):
    for seed in range(20):
        result = compose_analysis(_request(subject, kind, **extra), random.Random(seed))
        present = {
            name for name in ("technical_indicators", "fundamental_metrics", "sentiment_analysis")
            if getattr(result, name) is not None
        }
        assert present == SECTIONS[kind]


@pytest.mark.parametrize("subject,extra", ALL_SUBJECTS)
def test_confidence_and_enums(subject, extra):
    for seed in SEEDS:
        result = compose_analysis(_request(subject, "comprehensive", **extra), random.Random(seed))
        assert 60 <= result.confidence_score <= 95
        assert result.recommendation in ("buy", "sell", "hold", "watch")
        assert result.risk_level in ("low", "medium", "high")
        assert result.summary
        assert result.key_points
        sentiment = result.sentiment_analysis
        assert 0 <= sentiment.news_score <= 10
        assert 0 <= sentiment.social_score <= 10


def test_ticker_levels_bracket_base_price():
    for seed in SEEDS:
        result = compose_ticker_analysis("AAPL", "technical", random.Random(seed))
        s, r = result.support_levels, result.resistance_levels
        assert s[0] > s[1] > s[2]
        assert r[0] < r[1] < r[2]
        assert all(level < 178.72 for level in s)
        assert all(level > 178.72 for level in r)


def test_price_levels_helper(rng):
    support, resistance = price_levels(rng, 100.0)
    assert 95 <= support[0] <= 97
    assert 85 <= support[2] <= 90
    assert 103 <= resistance[0] <= 105
    assert 110 <= resistance[2] <= 115


def test_aapl_comprehensive_example():
    for seed in SEEDS:
        result = compose_analysis(
            _request("ticker", "comprehensive", ticker="AAPL"), random.Random(seed)
        )
        assert 125 <= result.price_target <= 270
        assert result.technical_indicators and result.fundamental_metrics and result.sentiment_analysis
        assert result.support_levels and result.resistance_levels
        if result.recommendation == "buy":
            assert result.price_target > 178.72
        elif result.recommendation == "sell":
            assert result.price_target < 178.72
        # three points per lens plus the Apple-specific one
        assert len(result.key_points) == 10
        assert "AAPL" in result.summary


def test_technology_sector_example():
    for seed in SEEDS:
        result = compose_analysis(
            _request("sector", "technical", sector="technology"), random.Random(seed)
        )
        assert result.technical_indicators is not None
        assert result.fundamental_metrics is None
        assert result.sentiment_analysis is None
        assert len(result.key_points) >= 5
        assert result.key_points[-1] == "AI and cloud computing remain key growth drivers for the sector."
        assert result.price_target is None


def test_unknown_sector_has_five_points(rng):
    result = compose_analysis(_request("sector", "technical", sector="consumer-staples"), rng)
    assert len(result.key_points) == 5
    assert "Consumer Staples sector" in result.summary


def test_ticker_key_points_per_lens(rng):
    assert len(compose_ticker_analysis("MSFT", "technical", rng).key_points) == 3
    assert len(compose_ticker_analysis("TSLA", "fundamental", rng).key_points) == 4
    assert len(compose_ticker_analysis("BTC-USD", "sentiment", rng).key_points) == 4


def test_portfolio_never_buy():
    for seed in SEEDS:
        result = compose_analysis(_request("portfolio", "comprehensive"), random.Random(seed))
        assert result.recommendation != "buy"
        assert result.price_target is None


def test_indicator_names():
    result = compose_analysis(_request("market", "technical"), random.Random(3))
    assert [i.name for i in result.technical_indicators] == [
        "Advance/Decline Line", "VIX Index", "Put/Call Ratio", "200-Day Moving Avg",
    ]
    result = compose_ticker_analysis("AAPL", "technical", random.Random(3))
    assert [i.name for i in result.technical_indicators] == [
        "RSI (14)", "MACD", "Moving Avg (50)", "Moving Avg (200)", "Bollinger Bands",
    ]


def test_sentiment_classification_thresholds():
    for seed in SEEDS:
        result = compose_ticker_analysis("AAPL", "sentiment", random.Random(seed))
        s = result.sentiment_analysis
        average = (s.news_score + s.social_score) / 2
        if average > 6.5:
            assert s.overall == "positive"
        elif average < 4.5:
            assert s.overall == "negative"
        else:
            assert s.overall == "neutral"


def test_format_sector():
    assert format_sector("real-estate") == "Real Estate"
    assert format_sector("technology") == "Technology"


def test_request_validation():
    with pytest.raises(ValidationError):
        AnalysisRequest(subject_kind="ticker")
    with pytest.raises(ValidationError):
        AnalysisRequest(subject_kind="sector", sector=" ")
    req = AnalysisRequest(subject_kind="ticker", ticker=" msft ", sector="energy")
    assert req.ticker == "MSFT"
    assert req.sector is None
    req = AnalysisRequest(subject_kind="market", ticker="AAPL")
    assert req.ticker is None
