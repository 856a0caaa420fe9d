"""Subscore calculators, composite scoring and score trends."""

from .composite import compose_overall_score, weighted_average
from .trend import ScoreTrend, score_trend

__all__ = ["ScoreTrend", "compose_overall_score", "score_trend", "weighted_average"]
