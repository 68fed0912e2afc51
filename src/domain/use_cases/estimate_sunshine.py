"""Sunshine hours estimation from a weather condition description."""

from typing import Tuple

# Checked in order; the first group with a matching keyword wins.
# Keywords cover English descriptions and the Japanese ones returned with lang=ja.
SUNSHINE_RULES: Tuple[Tuple[Tuple[str, ...], float], ...] = (
    (("thunder", "storm", "雷", "嵐"), 0.5),
    (("rain", "drizzle", "shower", "雨"), 1.0),
    (("cloud", "overcast", "曇", "雲"), 4.0),
    (("clear", "sun", "晴"), 8.0),
)
DEFAULT_SUNSHINE_HOURS = 6.0


def estimate_sunshine_hours(weather_condition: str) -> float:
    """
    Estimate daily sunshine hours from a condition description.

    Args:
        weather_condition: Free-text description, e.g. '晴天' or 'light rain'

    Returns:
        Estimated hours of sunshine
    """
    condition = (weather_condition or "").lower()
    for keywords, hours in SUNSHINE_RULES:
        if any(keyword in condition for keyword in keywords):
            return hours
    return DEFAULT_SUNSHINE_HOURS
