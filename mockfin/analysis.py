"""
Analysis composer.

Builds a complete ``AnalysisResult`` for a ticker, sector, portfolio or the
broad market from a sampled scenario plus independent draws for every
indicator, metric and sentiment score. No validation and no error path:
unknown tickers get a random reference price, unknown sectors simply get no
bonus insight.

Section gating is the same for every subject:

    technical      -> technical_indicators
    fundamental    -> fundamental_metrics
    sentiment      -> sentiment_analysis
    comprehensive  -> all three
"""
import logging
import random
from typing import Callable, Dict, List, Optional

from .fixtures import TICKER_INSIGHTS, SECTOR_INSIGHTS
from .quotes import base_price
from .scenario import ScenarioBias, sample_scenario
from .schemas import (
    AnalysisRequest, AnalysisResult, TechnicalIndicator, FundamentalMetric, SentimentAnalysis,
)

logger = logging.getLogger(__name__)

DEFAULT_TICKER = "AAPL"
DEFAULT_SECTOR = "technology"


def _uniform(rng: random.Random, low: float, span: float) -> float:
    return low + rng.random() * span


def _sign(is_bullish: bool) -> int:
    return 1 if is_bullish else -1


def _gate(analysis_kind: str, indicators, metrics, sentiment) -> dict:
    comprehensive = analysis_kind == "comprehensive"
    return dict(
        technical_indicators=indicators if comprehensive or analysis_kind == "technical" else None,
        fundamental_metrics=metrics if comprehensive or analysis_kind == "fundamental" else None,
        sentiment_analysis=sentiment if comprehensive or analysis_kind == "sentiment" else None,
    )


def _classify_sentiment(news_score: float, social_score: float, positive_above: float) -> str:
    average = (news_score + social_score) / 2
    if average > positive_above:
        return "positive"
    if average < 4.5:
        return "negative"
    return "neutral"


def _sentiment(rng: random.Random, floor: float, positive_above: float, insider_activity: str) -> SentimentAnalysis:
    span = 10 - floor
    news_score = _uniform(rng, floor, span)
    social_score = _uniform(rng, floor, span)
    return SentimentAnalysis(
        overall=_classify_sentiment(news_score, social_score, positive_above),
        news_score=news_score,
        social_score=social_score,
        insider_activity=insider_activity,
    )


def _roll_comparison(rng: random.Random, first_cut: float, first: str = "above", second: str = "below") -> str:
    if rng.random() > first_cut:
        return first
    return second if rng.random() > 0.5 else "in-line"


def format_sector(sector: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in sector.split("-"))


# -----------------------
# Ticker
# -----------------------

def _price_target(rng: random.Random, recommendation: str, price: float) -> float:
    if recommendation == "buy":
        return price * (1 + _uniform(rng, 0.10, 0.20))
    if recommendation == "sell":
        return price * (1 - _uniform(rng, 0.10, 0.15))
    return price * (1 + (rng.random() * 0.1 - 0.05))


def price_levels(rng: random.Random, price: float):
    """Three supports below ``price`` (descending) and three resistances above (ascending)."""
    bands = [(0.03, 0.02), (0.06, 0.03), (0.10, 0.05)]
    support = [price * (1 - _uniform(rng, low, span)) for low, span in bands]
    resistance = [price * (1 + _uniform(rng, low, span)) for low, span in bands]
    return support, resistance


def _ticker_indicators(rng: random.Random, bias: ScenarioBias, price: float) -> List[TechnicalIndicator]:
    bull = bias.is_bullish
    trend = "bullish" if bull else "bearish"
    rsi = int(_uniform(rng, 40, 30) if bull else _uniform(rng, 30, 40))
    rsi_signal = "bullish" if bull else ("bearish" if rng.random() > 0.3 else "neutral")
    macd = _sign(bull) * rng.random() * 2
    macd_signal = trend if rng.random() > 0.2 else "neutral"
    ma50 = price * (1 + _sign(bull) * rng.random() * 0.05)
    ma200 = price * (1 - _sign(bull) * rng.random() * 0.1)
    return [
        TechnicalIndicator(name="RSI (14)", value=str(rsi), signal=rsi_signal),
        TechnicalIndicator(name="MACD", value=f"{macd:.2f}", signal=macd_signal),
        TechnicalIndicator(name="Moving Avg (50)", value=f"${ma50:.2f}", signal=trend),
        TechnicalIndicator(name="Moving Avg (200)", value=f"${ma200:.2f}", signal=trend),
        TechnicalIndicator(name="Bollinger Bands", value="Near upper band" if bull else "Near lower band",
                           signal=trend),
    ]


def _ticker_metrics(rng: random.Random) -> List[FundamentalMetric]:
    return [
        FundamentalMetric(name="P/E Ratio", value=f"{_uniform(rng, 15, 30):.2f}",
                          comparison=_roll_comparison(rng, 0.5)),
        FundamentalMetric(name="EPS Growth", value=f"{rng.random() * 30 - 5:.2f}%",
                          comparison=_roll_comparison(rng, 0.6)),
        FundamentalMetric(name="Revenue Growth", value=f"{rng.random() * 25 - 2:.2f}%",
                          comparison=_roll_comparison(rng, 0.6)),
        FundamentalMetric(name="Profit Margin", value=f"{_uniform(rng, 5, 25):.2f}%",
                          comparison=_roll_comparison(rng, 0.5)),
        # lower leverage than peers reads as the good case
        FundamentalMetric(name="Debt to Equity", value=f"{_uniform(rng, 0.2, 1.5):.2f}",
                          comparison=_roll_comparison(rng, 0.5, first="below", second="above")),
    ]


def _insider_activity(rng: random.Random) -> str:
    if rng.random() > 0.7:
        return "Recent insider buying detected"
    if rng.random() > 0.5:
        return "Recent insider selling detected"
    return "No significant insider activity"


def _ticker_key_points(ticker: str, kind: str, bias: ScenarioBias, sentiment: SentimentAnalysis) -> List[str]:
    bull = bias.is_bullish
    points = []
    if kind in ("technical", "comprehensive"):
        points += [
            f"{ticker} is showing a strong uptrend with positive momentum indicators." if bull
            else f"{ticker} is in a downtrend with weakening momentum indicators.",
            "The stock is trading above its 50-day moving average, indicating bullish sentiment." if bull
            else "The stock is trading below its 50-day moving average, indicating bearish sentiment.",
            f"Volume patterns suggest {'increasing' if bull else 'decreasing'} institutional interest.",
        ]
    if kind in ("fundamental", "comprehensive"):
        points += [
            f"{ticker}'s financial health appears {'strong' if bull else 'concerning'} with "
            f"{'improving' if bull else 'deteriorating'} margins.",
            f"The company's growth rate is {'above' if bull else 'below'} the sector average.",
            f"Valuation metrics suggest the stock is currently {'undervalued' if bull else 'overvalued'} "
            f"relative to peers.",
        ]
    if kind in ("sentiment", "comprehensive"):
        points += [
            f"Market sentiment for {ticker} is generally {sentiment.overall} based on news and social media "
            f"analysis.",
            f"Analyst coverage has been {'increasingly positive' if bull else 'increasingly cautious'} "
            f"in recent reports.",
            f"{sentiment.insider_activity} in the past month.",
        ]
    if ticker in TICKER_INSIGHTS:
        points.append(TICKER_INSIGHTS[ticker])
    return points


def _ticker_summary(ticker: str, kind: str, bias: ScenarioBias, price_target: float) -> str:
    if bias.is_bullish:
        focus = {"technical": "technical patterns", "fundamental": "fundamentals"}.get(kind, "overall metrics")
        outlook = f"The stock shows promising {focus} with a price target of ${price_target:.2f}."
    else:
        focus = {"technical": "price action", "fundamental": "financial metrics"}.get(kind, "overall performance")
        outlook = f"The stock faces challenges in its {focus} with a price target of ${price_target:.2f}."
    basis = {
        "technical": "volatility and momentum factors",
        "fundamental": "financial stability and growth metrics",
    }.get(kind, "a combination of technical, fundamental, and sentiment indicators")
    return (
        f"Our {kind} analysis of {ticker} indicates a {bias.recommendation.upper()} recommendation "
        f"with a {bias.confidence_score}% confidence score. {outlook} "
        f"Risk is assessed as {bias.risk_level.upper()} based on {basis}."
    )


def compose_ticker_analysis(ticker: str, analysis_kind: str, rng: random.Random) -> AnalysisResult:
    ticker = (ticker or DEFAULT_TICKER).upper()
    bias = sample_scenario("ticker", rng)
    price = base_price(ticker, rng)
    target = _price_target(rng, bias.recommendation, price)
    support, resistance = price_levels(rng, price)
    indicators = _ticker_indicators(rng, bias, price)
    metrics = _ticker_metrics(rng)
    sentiment = _sentiment(rng, 3, 6.5, _insider_activity(rng))
    return AnalysisResult(
        summary=_ticker_summary(ticker, analysis_kind, bias, target),
        key_points=_ticker_key_points(ticker, analysis_kind, bias, sentiment),
        recommendation=bias.recommendation,
        confidence_score=bias.confidence_score,
        risk_level=bias.risk_level,
        price_target=target,
        support_levels=support,
        resistance_levels=resistance,
        **_gate(analysis_kind, indicators, metrics, sentiment),
    )


# -----------------------
# Sector
# -----------------------

def compose_sector_analysis(sector: str, analysis_kind: str, rng: random.Random) -> AnalysisResult:
    sector = (sector or DEFAULT_SECTOR).lower()
    bias = sample_scenario("sector", rng)
    bull = bias.is_bullish
    name = format_sector(sector)

    key_points = [
        f"The {name} sector is {'outperforming' if bull else 'underperforming'} the broader market by "
        f"{_uniform(rng, 1, 5):.1f}%.",
        f"{'Increasing' if bull else 'Decreasing'} capital inflows suggest "
        f"{'growing' if bull else 'waning'} investor interest.",
        f"Regulatory environment appears {'favorable' if rng.random() > 0.5 else 'challenging'} "
        f"for companies in this sector.",
        f"Valuations are {'attractive' if bull else 'stretched'} compared to historical averages.",
        f"Leading companies in the sector are reporting {'strong' if bull else 'mixed'} earnings results.",
    ]
    if sector in SECTOR_INSIGHTS:
        key_points.append(SECTOR_INSIGHTS[sector])

    trend = "bullish" if bull else "bearish"
    indicators = [
        TechnicalIndicator(name="Relative Strength", value=f"{_sign(bull) * _uniform(rng, 0.5, 2):.2f}",
                           signal=trend),
        TechnicalIndicator(name="Money Flow Index",
                           value=str(int(_uniform(rng, 50, 40) if bull else _uniform(rng, 10, 40))),
                           signal=trend),
        TechnicalIndicator(name="Sector Momentum", value=f"{_sign(bull) * _uniform(rng, 0.2, 3):.2f}",
                           signal="bullish" if bull else "neutral"),
    ]
    metrics = [
        FundamentalMetric(name="Avg P/E Ratio", value=f"{_uniform(rng, 15, 25):.2f}",
                          comparison="below" if bull else "above"),
        FundamentalMetric(name="Revenue Growth", value=f"{rng.random() * 15 - (0 if bull else 5):.2f}%",
                          comparison="above" if bull else "below"),
        FundamentalMetric(name="Profit Margin", value=f"{_uniform(rng, 5, 20):.2f}%",
                          comparison="above" if bull else "below"),
        FundamentalMetric(name="Dividend Yield", value=f"{_uniform(rng, 1, 3):.2f}%",
                          comparison="above" if rng.random() > 0.5 else "below"),
    ]
    sentiment = _sentiment(
        rng, 3, 6,
        f"Insider transactions in the sector show a {'net buying' if rng.random() > 0.5 else 'net selling'} trend",
    )

    lens = ("Technical indicators, fundamentals, and sentiment analysis all" if analysis_kind == "comprehensive"
            else f"{analysis_kind.capitalize()} indicators")
    summary = (
        f"Our analysis of the {name} sector indicates a {bias.recommendation.upper()} recommendation with "
        f"{bias.confidence_score}% confidence. The sector is "
        f"{'well-positioned for growth' if bull else 'facing significant headwinds'} in the current market "
        f"environment. {lens} suggest a {bias.risk_level} risk profile for investments in this sector."
    )
    return AnalysisResult(
        summary=summary,
        key_points=key_points,
        recommendation=bias.recommendation,
        confidence_score=bias.confidence_score,
        risk_level=bias.risk_level,
        **_gate(analysis_kind, indicators, metrics, sentiment),
    )


# -----------------------
# Portfolio
# -----------------------

def compose_portfolio_analysis(analysis_kind: str, rng: random.Random) -> AnalysisResult:
    bias = sample_scenario("portfolio", rng)
    bull = bias.is_bullish
    risk = bias.risk_level
    volatility = {"low": "below", "medium": "in line with"}.get(risk, "above")

    key_points = [
        f"Your portfolio {'is outperforming' if bull else 'is underperforming'} the S&P 500 by "
        f"{rng.random() * 4 - (0 if bull else 2):.1f}% year-to-date.",
        f"Sector allocation appears "
        f"{'well-diversified' if rng.random() > 0.5 else 'concentrated in a few sectors'}, which "
        f"{'reduces' if rng.random() > 0.5 else 'increases'} overall risk.",
        f"{'Increasing' if rng.random() > 0.5 else 'Reducing'} exposure to "
        f"{'technology' if rng.random() > 0.5 else 'healthcare'} stocks could improve risk-adjusted returns.",
        f"Dividend-paying stocks comprise {int(rng.random() * 60)}% of your portfolio, providing income stability.",
        f"Portfolio volatility is {volatility} market averages.",
    ]
    indicators = [
        TechnicalIndicator(name="Portfolio Beta", value=f"{_uniform(rng, 0.7, 0.6):.2f}",
                           signal="bearish" if risk == "high" else "neutral"),
        TechnicalIndicator(name="Sharpe Ratio", value=f"{_uniform(rng, 0.8, 1.2):.2f}",
                           signal="bullish" if bull else "neutral"),
        TechnicalIndicator(name="Drawdown", value=f"{_uniform(rng, 5, 15):.2f}%",
                           signal={"low": "bullish", "medium": "neutral"}.get(risk, "bearish")),
    ]
    metrics = [
        FundamentalMetric(name="Avg P/E Ratio", value=f"{_uniform(rng, 16, 20):.2f}",
                          comparison="above" if rng.random() > 0.5 else "below"),
        FundamentalMetric(name="Dividend Yield", value=f"{_uniform(rng, 1.5, 2.5):.2f}%",
                          comparison="above" if rng.random() > 0.5 else "below"),
        FundamentalMetric(name="Earnings Growth", value=f"{_uniform(rng, 5, 15):.2f}%",
                          comparison="above" if bull else "below"),
        FundamentalMetric(name="Debt to Equity", value=f"{_uniform(rng, 0.4, 1.2):.2f}",
                          comparison="below" if rng.random() > 0.5 else "above"),
    ]
    sentiment = _sentiment(rng, 4, 6.5, "Mixed insider activity across portfolio holdings")

    goal = {"low": "growth potential", "medium": "risk-adjusted returns"}.get(risk, "downside protection")
    summary = (
        f"Our {analysis_kind} analysis of your portfolio indicates a {bias.recommendation.upper()} recommendation "
        f"with {bias.confidence_score}% confidence. Your investments are "
        f"{'generally well-positioned' if bull else 'facing some challenges'} in the current market environment. "
        f"We've identified several opportunities to optimize your holdings for better {goal}."
    )
    return AnalysisResult(
        summary=summary,
        key_points=key_points,
        recommendation=bias.recommendation,
        confidence_score=bias.confidence_score,
        risk_level=risk,
        **_gate(analysis_kind, indicators, metrics, sentiment),
    )


# -----------------------
# Market
# -----------------------

def compose_market_analysis(analysis_kind: str, rng: random.Random) -> AnalysisResult:
    bias = sample_scenario("market", rng)
    bull = bias.is_bullish
    trend = "bullish" if bull else "bearish"

    key_points = [
        f"Market breadth indicators are {'improving' if bull else 'deteriorating'}, with "
        f"{'more' if bull else 'fewer'} stocks participating in recent {'rallies' if bull else 'declines'}.",
        f"Volatility indices suggest {'decreasing' if bull else 'increasing'} market uncertainty in the near term.",
        f"Sector rotation patterns indicate money flows {'toward' if bull else 'away from'} cyclical sectors, "
        f"suggesting {'economic optimism' if bull else 'economic concerns'}.",
        f"Interest rate expectations are "
        f"{'supportive of' if rng.random() > 0.5 else 'creating headwinds for'} equity valuations.",
        f"Institutional positioning shows {'increasing' if bull else 'decreasing'} allocation to equities "
        f"versus fixed income and cash.",
    ]
    indicators = [
        TechnicalIndicator(name="Advance/Decline Line", value="Uptrend" if bull else "Downtrend", signal=trend),
        TechnicalIndicator(name="VIX Index", value=f"{_uniform(rng, 15, 20):.2f}", signal=trend),
        TechnicalIndicator(name="Put/Call Ratio", value=f"{_uniform(rng, 0.7, 0.6):.2f}", signal=trend),
        TechnicalIndicator(name="200-Day Moving Avg", value=f"S&P 500 {'above' if bull else 'below'}", signal=trend),
    ]
    metrics = [
        FundamentalMetric(name="S&P 500 P/E Ratio", value=f"{_uniform(rng, 16, 8):.2f}",
                          comparison="in-line" if bull else "above"),
        FundamentalMetric(name="Earnings Growth", value=f"{_uniform(rng, 3, 12):.2f}%",
                          comparison="above" if bull else "below"),
        FundamentalMetric(name="Dividend Yield", value=f"{_uniform(rng, 1.5, 1):.2f}%",
                          comparison="above" if rng.random() > 0.5 else "below"),
        FundamentalMetric(name="GDP Growth", value=f"{_uniform(rng, 1, 3):.2f}%",
                          comparison="above" if bull else "below"),
    ]
    sentiment = _sentiment(
        rng, 3, 6,
        f"Corporate insiders showing {'net buying' if rng.random() > 0.5 else 'net selling'} activity",
    )

    basis = ("a combination of technical, fundamental, and sentiment indicators" if analysis_kind == "comprehensive"
             else f"{analysis_kind} factors")
    summary = (
        f"Our {analysis_kind} analysis of current market conditions indicates a {bias.recommendation.upper()} "
        f"recommendation with {bias.confidence_score}% confidence. The broader market appears "
        f"{'poised for continued strength' if bull else 'vulnerable to correction'} based on {basis}. "
        f"Risk is assessed as {bias.risk_level.upper()} over the near term."
    )
    return AnalysisResult(
        summary=summary,
        key_points=key_points,
        recommendation=bias.recommendation,
        confidence_score=bias.confidence_score,
        risk_level=bias.risk_level,
        **_gate(analysis_kind, indicators, metrics, sentiment),
    )


_COMPOSERS: Dict[str, Callable[[AnalysisRequest, random.Random], AnalysisResult]] = {
    "ticker": lambda req, rng: compose_ticker_analysis(req.ticker, req.analysis_kind, rng),
    "sector": lambda req, rng: compose_sector_analysis(req.sector, req.analysis_kind, rng),
    "portfolio": lambda req, rng: compose_portfolio_analysis(req.analysis_kind, rng),
    "market": lambda req, rng: compose_market_analysis(req.analysis_kind, rng),
}


def compose_analysis(request: AnalysisRequest, rng: Optional[random.Random] = None) -> AnalysisResult:
    rng = rng or random.Random()
    composer = _COMPOSERS.get(request.subject_kind, _COMPOSERS["market"])
    result = composer(request, rng)
    logger.debug("Composed %s/%s analysis: %s (%d%%)", request.subject_kind, request.analysis_kind,
                 result.recommendation, result.confidence_score)
    return result
