"""Noise, timing and timestamp models for simulated labelers.

Every function takes the random source explicitly so that a seeded
generator reproduces a run exactly.
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta
from typing import Mapping, Tuple

from labelops.models.labeler import ExperienceLevel
from labelops.models.sample import MAX_COMPLEXITY, Sentiment

from .random_source import RandomSource, uniform

DEFAULT_COMPLEXITY_PENALTY = 0.15


def adjusted_accuracy(
    accuracy: float, complexity: int, penalty: float = DEFAULT_COMPLEXITY_PENALTY
) -> float:
    """Accuracy after the linear complexity degradation."""

    complexity_factor = complexity / MAX_COMPLEXITY
    return accuracy * (1 - complexity_factor * penalty)


def should_make_error(
    accuracy: float,
    complexity: int,
    rng: RandomSource,
    penalty: float = DEFAULT_COMPLEXITY_PENALTY,
) -> bool:
    """Bernoulli trial: ``True`` when the labeler gets this sample wrong."""

    return rng.random() > adjusted_accuracy(accuracy, complexity, penalty)


def wrong_sentiment(correct: Sentiment, rng: RandomSource) -> Sentiment:
    candidates = [sentiment for sentiment in Sentiment if sentiment is not correct]
    return rng.choice(candidates)


def predict_sentiment(
    true_sentiment: Sentiment, make_error: bool, rng: RandomSource
) -> Sentiment:
    if make_error:
        return wrong_sentiment(true_sentiment, rng)
    return true_sentiment


def confidence_score(
    is_correct: bool,
    level: ExperienceLevel,
    rng: RandomSource,
    error_range: Tuple[float, float],
    correct_floors: Mapping[str, float],
    ceiling: float,
) -> float:
    """Confidence rounded to two decimals.

    Incorrect labels draw from ``error_range``; correct labels draw from the
    tier floor up to ``ceiling``.
    """

    if is_correct:
        low, high = correct_floors[level.value], ceiling
    else:
        low, high = error_range
    return round(uniform(rng, low, high), 2)


def time_spent_seconds(
    labels_per_hour: float,
    rng: RandomSource,
    base_time_range: Tuple[float, float],
    reference_throughput: float,
) -> int:
    """Handling time in whole seconds, scaled down for faster labelers."""

    if labels_per_hour <= 0:
        raise ValueError(f"labels_per_hour must be positive: {labels_per_hour}")
    base_time = uniform(rng, *base_time_range)
    speed_factor = labels_per_hour / reference_throughput
    return max(1, math.floor(base_time / speed_factor))


def synthesize_timestamp(
    base_time: datetime,
    position: int,
    label_index: int,
    total_labels: int,
    rng: RandomSource,
    window_days: int = 7,
    hour_spacing: int = 2,
    max_jitter_minutes: float = 120.0,
) -> datetime:
    """Timestamp that makes the run look like work spread over ``window_days``.

    Earlier labels sit further back in time; ``position`` is the labeler's
    slot in the per-sample draw and shifts the hour. Jitter keeps neighbours
    from colliding. No ordering is guaranteed.
    """

    elapsed_days = (label_index * window_days) // max(total_labels, 1)
    days_ago = window_days - elapsed_days
    hours_ago = position * hour_spacing
    minutes_ago = rng.random() * max_jitter_minutes
    return base_time - timedelta(days=days_ago, hours=hours_ago, minutes=minutes_ago)


__all__ = [
    "DEFAULT_COMPLEXITY_PENALTY",
    "adjusted_accuracy",
    "confidence_score",
    "predict_sentiment",
    "should_make_error",
    "synthesize_timestamp",
    "time_spent_seconds",
    "wrong_sentiment",
]
