"""Maps provider condition text onto the internal condition labels."""
from typing import Tuple

from weather_data import CLOUDY, FOGGY, RAINY, SUNNY, WINDY

WINDY_THRESHOLD_MPH = 15.0

# Checked in order; the first label with a matching keyword wins.
KEYWORD_RULES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    (FOGGY, ("fog", "mist")),
    (RAINY, ("rain", "drizzle")),
    (CLOUDY, ("cloud", "overcast")),
    (SUNNY, ("clear", "sunny")),
)


def classify_condition(description: str, wind_mph: float) -> str:
    """
    Classify a condition description into one of the condition labels.

    Keyword matches take precedence over wind. With no keyword match, wind
    strictly above WINDY_THRESHOLD_MPH gives "windy", anything else "sunny".

    Args:
        description: Provider condition text (e.g. "Patchy light drizzle")
        wind_mph: Wind speed in mph as reported by the provider

    Returns:
        Condition label
    """
    text = (description or "").lower()
    for label, keywords in KEYWORD_RULES:
        if any(keyword in text for keyword in keywords):
            return label

    if wind_mph is not None and wind_mph > WINDY_THRESHOLD_MPH:
        return WINDY
    return SUNNY
