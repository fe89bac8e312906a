"""Weekly dinner plan builder.

Provides build_plan(recipes, weather, rng=None): one dinner per weekday, Monday..Sunday.

Per day:
  1. protein ratios are read from the running ProteinBalanceCounter;
  2. the first matching rule of DAY_RULES picks a candidate group
     (weekend -> weather, early week -> quick / kid-friendly, late week -> protein balance);
  3. select_with_variety picks an unused recipe, falling back to the whole pool;
  4. the pick is counted, and the used-id set is cleared once it covers
     VARIETY_RESET_FACTOR of the pool.

Random choices go through `rng` (anything with a choice(sequence) method,
e.g. random.Random(seed)) so tests can make them deterministic.
"""
from __future__ import annotations
import logging
import math
import random
from typing import Callable, Dict, List, Optional, Sequence, Set, Tuple

from dinnerplan.domain.Plan import DayPlan, Plan
from dinnerplan.domain.ProteinBalance import ProteinBalanceCounter
from dinnerplan.domain.Recipe import Recipe
from dinnerplan.domain.Weather import WeatherClassification
from dinnerplan.logic.planning.candidates import CandidateGroups, union
from dinnerplan.utilities.constants import (
    DAY_NAMES, MIN_FISH_RATIO, MIN_VEGETARIAN_RATIO, VARIETY_RESET_FACTOR
)

logger = logging.getLogger(__name__)

CandidateSelector = Callable[[CandidateGroups, WeatherClassification, Dict[str, float]], List[Recipe]]
DayRule = Tuple[str, Callable[[int], bool], CandidateSelector]


# -------------------- Day rules --------------------
def _weekend_candidates(groups: CandidateGroups, weather: WeatherClassification, ratios: Dict[str, float]):
    if weather.is_cold:
        return union(groups.comfort, groups.weather_appropriate)
    return groups.weather_appropriate if groups.weather_appropriate else groups.dinners


def _early_week_candidates(groups: CandidateGroups, weather: WeatherClassification, ratios: Dict[str, float]):
    return union(groups.quick, groups.kid_friendly)


def _late_week_candidates(groups: CandidateGroups, weather: WeatherClassification, ratios: Dict[str, float]):
    if ratios["vegetarian"] < MIN_VEGETARIAN_RATIO:
        return groups.pescatarian_or_veg
    if ratios["fish"] < MIN_FISH_RATIO:
        return groups.fish
    return groups.dinners


# Checked in order, first match wins. Day 6 is caught by the weekend rule.
DAY_RULES: List[DayRule] = [
    ("weekend", lambda day_index: day_index in (0, 6), _weekend_candidates),
    ("early_week", lambda day_index: 1 <= day_index <= 3, _early_week_candidates),
    ("late_week", lambda day_index: day_index >= 4, _late_week_candidates),
]


def choose_candidates(day_index: int, groups: CandidateGroups, weather: WeatherClassification,
                      balance: ProteinBalanceCounter, rules: Sequence[DayRule] = DAY_RULES) -> Tuple[str, List[Recipe]]:
    """Return (rule name, candidate recipes) for the given day index."""
    ratios = balance.ratios()
    for name, applies, select in rules:
        if applies(day_index):
            return name, select(groups, weather, ratios)
    return "full_pool", groups.dinners


# -------------------- Selection --------------------
def select_with_variety(candidates: List[Recipe], pool: List[Recipe], used_ids: Set, rng) -> Optional[Recipe]:
    """Pick a recipe, preferring ones not used yet.

    Fallback order:
      a. unused candidates
      b. unused recipes from the whole pool
      c. unused recipes from candidates + pool
      d. any candidate (or any pool recipe if there are no candidates)
    """
    available = [r for r in candidates if r.id not in used_ids]
    if not available and pool:
        available = [r for r in pool if r.id not in used_ids]
    if not available:
        available = [r for r in union(candidates, pool) if r.id not in used_ids]
    if not available:
        available = candidates if candidates else pool
        if not available:
            return None
    return rng.choice(available)


def variety_reset_threshold(pool_size: int) -> int:
    return math.floor(pool_size * VARIETY_RESET_FACTOR)


def build_plan(recipes: Sequence[Recipe], weather: Optional[WeatherClassification] = None, rng=None) -> Plan:
    """Build a Monday..Sunday dinner plan.

    Args:
        recipes: candidate recipes of any meal type; only dinners are planned.
        weather: current weather classification (moderate if omitted).
        rng: random source with a choice(sequence) method.

    Returns:
        Plan with exactly 7 DayPlan entries; days without a pick have dinner=None.
    """
    weather = weather or WeatherClassification()
    rng = rng or random.Random()
    groups = CandidateGroups(recipes or [], weather)
    threshold = variety_reset_threshold(groups.pool_size)
    logger.debug("Planning with %s, weather=%s", groups, weather.label)

    used_ids: Set = set()
    balance = ProteinBalanceCounter()
    days: List[DayPlan] = []

    for day_index, day_name in enumerate(DAY_NAMES):
        day_plan = DayPlan(day_name)
        days.append(day_plan)
        if not groups.dinners:
            continue

        strategy, candidates = choose_candidates(day_index, groups, weather, balance)
        day_plan.strategy = strategy
        selected = select_with_variety(candidates, groups.dinners, used_ids, rng)
        if selected is None:
            continue

        day_plan.dinner = selected
        used_ids.add(selected.id)
        balance.record(selected)
        logger.debug("%s (%s, %d candidates): %s", day_name, strategy, len(candidates), selected.name)

        # Checked after insertion, so a pool of one or two resets every day
        if len(used_ids) >= threshold:
            logger.debug("Variety reset after %s (%d of %d used)", day_name, len(used_ids), groups.pool_size)
            used_ids.clear()

    plan = Plan(days, protein_balance=balance.copy())
    logger.info("Built dinner plan: %d/%d days assigned, %s",
                len(plan.dinners()), len(plan), balance)
    return plan


__all__ = ["build_plan", "choose_candidates", "select_with_variety", "variety_reset_threshold", "DAY_RULES"]
