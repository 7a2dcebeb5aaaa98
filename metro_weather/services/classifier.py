"""Weather code classification into condition categories and icons."""

from ..models.weather import ConditionCategory

# Upper bound (inclusive) of each category, checked in ascending order.
# Codes above the last bound are thunderstorms.
CODE_THRESHOLDS: tuple[tuple[int, ConditionCategory], ...] = (
    (0, ConditionCategory.CLEAR),
    (3, ConditionCategory.PARTLY_CLOUDY),
    (48, ConditionCategory.CLOUDY),
    (67, ConditionCategory.RAINY),
    (77, ConditionCategory.SNOWY),
)

ICONS: dict[ConditionCategory, str] = {
    ConditionCategory.CLEAR: "sunny",
    ConditionCategory.PARTLY_CLOUDY: "partly-sunny",
    ConditionCategory.CLOUDY: "cloudy",
    ConditionCategory.RAINY: "rainy",
    ConditionCategory.SNOWY: "snow",
    ConditionCategory.THUNDERSTORM: "thunderstorm",
}


def icon_for(category: ConditionCategory) -> str:
    """Return the icon identifier for a condition category."""
    return ICONS[category]


def classify(code: int) -> tuple[ConditionCategory, str]:
    """Map a weather code to its condition category and icon identifier.

    Args:
        code: Non-negative weather code from the forecast API

    Returns:
        Tuple of (category, icon_id)

    Raises:
        ValueError: If the code is negative
    """
    if code < 0:
        raise ValueError(f"Weather code must be non-negative, got {code}")

    for upper, category in CODE_THRESHOLDS:
        if code <= upper:
            return category, ICONS[category]
    return ConditionCategory.THUNDERSTORM, ICONS[ConditionCategory.THUNDERSTORM]
