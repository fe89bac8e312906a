"""Candidate groups for dinner selection.

The dinner-eligible pool is split once per planning run into overlapping,
named groups; the day rules in plan_builder pick one of them per day.
"""
from __future__ import annotations
from typing import Iterable, List

from dinnerplan.domain.Recipe import Recipe
from dinnerplan.domain.Weather import WeatherClassification
from dinnerplan.utilities.constants import COMFORT_TAG, KID_FRIENDLY_TAG, QUICK_MAX_MINUTES, QUICK_TAG

__all__ = ["CandidateGroups", "union", "is_weather_appropriate"]


def union(*groups: Iterable[Recipe]) -> List[Recipe]:
    """Order-preserving union of recipe lists, de-duplicated by id."""
    seen = set()
    merged: List[Recipe] = []
    for group in groups:
        for recipe in group:
            if recipe.id in seen:
                continue
            seen.add(recipe.id)
            merged.append(recipe)
    return merged


def is_weather_appropriate(recipe: Recipe, weather: WeatherClassification) -> bool:
    if recipe.weather_preference == "any":
        return True
    if weather.is_hot and recipe.weather_preference == "hot":
        return True
    if weather.is_cold and recipe.weather_preference == "cold":
        return True
    return False


class CandidateGroups:
    def __init__(self, recipes: Iterable[Recipe], weather: WeatherClassification):
        self.dinners: List[Recipe] = [r for r in recipes if r.is_dinner]
        self.pescatarian_or_veg = [r for r in self.dinners if r.protein_type in ("fish", "vegetarian", "vegan")]
        self.meat = [r for r in self.dinners if r.protein_type == "meat"]
        self.fish = [r for r in self.dinners if r.protein_type == "fish"]
        self.quick = [r for r in self.dinners
                      if r.has_tag(QUICK_TAG) and r.total_time <= QUICK_MAX_MINUTES]
        self.kid_friendly = [r for r in self.dinners if r.has_tag(KID_FRIENDLY_TAG)]
        self.comfort = [r for r in self.dinners if r.has_tag(COMFORT_TAG)]
        # A filter, not an exclusion: recipes left out stay reachable via other groups
        self.weather_appropriate = [r for r in self.dinners if is_weather_appropriate(r, weather)]

    @property
    def pool_size(self) -> int:
        return len(self.dinners)

    def __str__(self) -> str:
        return (f"CandidateGroups(dinners={len(self.dinners)}, quick={len(self.quick)}, "
                f"kid_friendly={len(self.kid_friendly)}, comfort={len(self.comfort)}, "
                f"weather_appropriate={len(self.weather_appropriate)})")

    __repr__ = __str__
