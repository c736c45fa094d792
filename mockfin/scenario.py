"""
Scenario sampler: the bullish/bearish bias behind one analysis.

Each derived field takes its own draw from ``rng``, so recommendation,
confidence and risk only loosely follow ``is_bullish``. A bullish ticker can
still come out as high risk; that coupling is intentional.
"""
import random
from dataclasses import dataclass
from typing import Callable, Dict

# confidence = floor(floor + U * span) -> always inside [60, 95]
CONFIDENCE_BOUNDS = (60, 95)


@dataclass(frozen=True)
class ScenarioBias:
    is_bullish: bool
    recommendation: str
    confidence_score: int
    risk_level: str


def _confidence(rng: random.Random, floor: int, span: int) -> int:
    return int(floor + rng.random() * span)


def _ticker(rng: random.Random) -> ScenarioBias:
    is_bullish = rng.random() > 0.4
    recommendation = "buy" if is_bullish else ("hold" if rng.random() > 0.5 else "sell")
    confidence = _confidence(rng, 65, 30)
    if is_bullish:
        risk = "medium" if rng.random() > 0.7 else "low"
    else:
        risk = "high" if rng.random() > 0.3 else "medium"
    return ScenarioBias(is_bullish, recommendation, confidence, risk)


def _broad(rng: random.Random) -> ScenarioBias:
    # sector and market share one profile
    is_bullish = rng.random() > 0.4
    if is_bullish:
        recommendation = "buy" if rng.random() > 0.3 else "watch"
    else:
        recommendation = "hold" if rng.random() > 0.5 else "sell"
    confidence = _confidence(rng, 60, 30)
    if is_bullish:
        risk = "medium" if rng.random() > 0.6 else "low"
    else:
        risk = "high" if rng.random() > 0.4 else "medium"
    return ScenarioBias(is_bullish, recommendation, confidence, risk)


def _portfolio(rng: random.Random) -> ScenarioBias:
    # never "buy" for a portfolio; risk ignores the bias entirely
    is_bullish = rng.random() > 0.3
    recommendation = "hold" if is_bullish else ("watch" if rng.random() > 0.5 else "sell")
    confidence = _confidence(rng, 65, 25)
    if rng.random() > 0.6:
        risk = "medium"
    else:
        risk = "low" if rng.random() > 0.5 else "high"
    return ScenarioBias(is_bullish, recommendation, confidence, risk)


_SAMPLERS: Dict[str, Callable[[random.Random], ScenarioBias]] = {
    "ticker": _ticker,
    "sector": _broad,
    "market": _broad,
    "portfolio": _portfolio,
}


def sample_scenario(subject_kind: str, rng: random.Random) -> ScenarioBias:
    """Draw a fresh bias for ``subject_kind``; unknown kinds use the market profile."""
    return _SAMPLERS.get(subject_kind, _broad)(rng)
