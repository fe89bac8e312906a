from typing import Final

DAY_NAMES: Final[tuple[str, ...]] = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"
)

MEAL_TYPES: Final[tuple[str, ...]] = ("breakfast", "dinner")
PLANNED_MEAL_TYPE: Final[str] = "dinner"
PROTEIN_TYPES: Final[tuple[str, ...]] = ("meat", "fish", "vegetarian", "vegan")
WEATHER_PREFERENCES: Final[tuple[str, ...]] = ("hot", "cold", "any")

# Candidate group tags
QUICK_TAG: Final[str] = "quick"
KID_FRIENDLY_TAG: Final[str] = "kid-friendly"
COMFORT_TAG: Final[str] = "comfort"
QUICK_MAX_MINUTES: Final[int] = 30

# Late-week protein balance targets
MIN_VEGETARIAN_RATIO: Final[float] = 0.3
MIN_FISH_RATIO: Final[float] = 0.2

# Used-id set is cleared once it holds this share of the dinner pool
VARIETY_RESET_FACTOR: Final[float] = 0.8
