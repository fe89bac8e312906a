import random
import unittest
from collections import Counter

from dinnerplan.domain.ProteinBalance import ProteinBalanceCounter
from dinnerplan.domain.Recipe import Recipe
from dinnerplan.domain.Weather import WeatherClassification
from dinnerplan.infra.Recipe_Repository import reading_sample_recipes
from dinnerplan.logic.planning.candidates import CandidateGroups
from dinnerplan.logic.planning.plan_builder import (
    build_plan, choose_candidates, select_with_variety, variety_reset_threshold
)
from dinnerplan.utilities.constants import DAY_NAMES

HOT = WeatherClassification(is_hot=True)
COLD = WeatherClassification(is_cold=True)
MODERATE = WeatherClassification()


class FirstChoice:
    """Deterministic random source: always the first option."""
    def choice(self, seq):
        return seq[0]


def _recipe(id, protein_type="meat", tags=None, prep=20, cook=20, weather="any", meal_type="dinner"):
    return Recipe(id=id, name=f"Recipe {id}", ingredients=[f"100g item {id}"], prep_time=prep, cook_time=cook,
                  meal_type=meal_type, protein_type=protein_type, dietary_tags=tags or [],
                  weather_preference=weather)


class TestBuildPlanShape(unittest.TestCase):

    def test_seven_days_in_order(self):
        for recipes in ([], reading_sample_recipes(), [_recipe(1)]):
            plan = build_plan(recipes, MODERATE, rng=random.Random(3))
            self.assertEqual(len(plan), 7)
            self.assertEqual([d.day_name for d in plan], list(DAY_NAMES))

    def test_empty_pool_has_no_dinners(self):
        plan = build_plan([], COLD)
        self.assertTrue(all(d.dinner is None for d in plan))
        self.assertEqual(plan.protein_balance.total, 0)

    def test_breakfast_only_pool_has_no_dinners(self):
        recipes = [_recipe(1, meal_type="breakfast", tags=["quick"]), _recipe(2, meal_type="breakfast")]
        plan = build_plan(recipes, MODERATE, rng=random.Random(1))
        self.assertEqual(plan.dinners(), [])

    def test_non_dinner_never_selected(self):
        breakfast = _recipe("b", tags=["quick", "kid-friendly"], prep=5, cook=5, meal_type="breakfast")
        recipes = [breakfast, _recipe(1), _recipe(2, protein_type="fish")]
        for seed in range(20):
            plan = build_plan(recipes, MODERATE, rng=random.Random(seed))
            self.assertNotIn(breakfast, plan.dinners())

    def test_weather_defaults_to_moderate(self):
        plan = build_plan([_recipe(1)])
        self.assertEqual(len(plan.dinners()), 7)


class TestBuildPlanProperties(unittest.TestCase):

    def setUp(self):
        self.recipes = reading_sample_recipes()

    def test_dinners_are_input_objects(self):
        for seed in range(20):
            plan = build_plan(self.recipes, COLD, rng=random.Random(seed))
            for day in plan:
                self.assertIsNotNone(day.dinner)
                self.assertTrue(any(day.dinner is r for r in self.recipes))

    def test_protein_balance_matches_dinners(self):
        for seed in range(20):
            plan = build_plan(self.recipes, HOT, rng=random.Random(seed))
            dinners = plan.dinners()
            self.assertEqual(plan.protein_balance.total, len(dinners))
            kinds = Counter(d.protein_type for d in dinners)
            self.assertEqual(plan.protein_balance.meat, kinds["meat"])
            self.assertEqual(plan.protein_balance.fish, kinds["fish"])

    def test_first_picks_distinct_until_reset(self):
        # 5 recipes -> used set cleared only after 4 distinct picks
        for seed in range(20):
            plan = build_plan(self.recipes, MODERATE, rng=random.Random(seed))
            first_four = [d.dinner.id for d in plan.days[:4]]
            self.assertEqual(len(set(first_four)), 4)

    def test_seeded_rng_is_reproducible(self):
        a = build_plan(self.recipes, MODERATE, rng=random.Random(42))
        b = build_plan(self.recipes, MODERATE, rng=random.Random(42))
        self.assertEqual([d.dinner.id for d in a], [d.dinner.id for d in b])

    def test_strategy_per_day(self):
        plan = build_plan(self.recipes, MODERATE, rng=random.Random(0))
        self.assertEqual([d.strategy for d in plan],
                         ["weekend", "early_week", "early_week", "early_week", "late_week", "late_week", "weekend"])


class TestBuildPlanScenarios(unittest.TestCase):

    def test_two_recipe_pool_resets_variety(self):
        fish = _recipe("A", protein_type="fish")
        quick_meat = _recipe("B", protein_type="meat", tags=["quick"], prep=10, cook=15)
        for seed in range(20):
            plan = build_plan([fish, quick_meat], MODERATE, rng=random.Random(seed))
            counts = Counter(d.dinner.id for d in plan)
            self.assertEqual(sum(counts.values()), 7)
            self.assertGreaterEqual(counts["A"], 2)
            self.assertGreaterEqual(counts["B"], 2)
            # early week only has the quick recipe, late week needs vegetarian/fish
            self.assertEqual([d.dinner.id for d in plan.days[1:4]], ["B", "B", "B"])
            self.assertEqual([d.dinner.id for d in plan.days[4:6]], ["A", "A"])

    def test_hot_weather_weekend_skips_cold_recipe(self):
        cold_quick = _recipe("C", tags=["quick"], prep=10, cook=10, weather="cold")
        anytime = _recipe("D", protein_type="vegetarian")
        for seed in range(10):
            plan = build_plan([cold_quick, anytime], HOT, rng=random.Random(seed))
            self.assertIs(plan[0].dinner, anytime)
            self.assertIs(plan[6].dinner, anytime)
            # still reachable through the quick group
            self.assertIn(cold_quick, [d.dinner for d in plan.days[1:4]])

    def test_cold_weekend_prefers_comfort_or_cold(self):
        comfort = _recipe("E", tags=["comfort"], weather="hot")
        cold = _recipe("F", weather="cold")
        hot = _recipe("G", weather="hot")
        for seed in range(20):
            plan = build_plan([comfort, cold, hot], COLD, rng=random.Random(seed))
            self.assertIn(plan[0].dinner, (comfort, cold))

    def test_weekend_falls_back_to_pool_without_weather_match(self):
        plan = build_plan([_recipe(1, weather="hot"), _recipe(2, weather="hot")], MODERATE, rng=random.Random(5))
        self.assertIsNotNone(plan[0].dinner)
        self.assertIsNotNone(plan[6].dinner)

    def test_early_week_without_quick_recipes_uses_pool(self):
        recipes = [_recipe(i) for i in range(3)]
        plan = build_plan(recipes, MODERATE, rng=random.Random(2))
        for day in plan.days[1:4]:
            self.assertIsNotNone(day.dinner)

    def test_quick_needs_tag_and_short_time(self):
        slow_quick = _recipe(1, tags=["quick"], prep=20, cook=20)
        fast_untagged = _recipe(2, prep=5, cook=5)
        fast_quick = _recipe(3, tags=["quick"], prep=10, cook=20)
        groups = CandidateGroups([slow_quick, fast_untagged, fast_quick], MODERATE)
        self.assertEqual(groups.quick, [fast_quick])


class TestChooseCandidates(unittest.TestCase):

    def setUp(self):
        self.meat = _recipe(1, protein_type="meat")
        self.fish = _recipe(2, protein_type="fish")
        self.veg = _recipe(3, protein_type="vegetarian", tags=["kid-friendly"])
        self.vegan = _recipe(4, protein_type="vegan", tags=["quick"], prep=5, cook=5)
        self.groups = CandidateGroups([self.meat, self.fish, self.veg, self.vegan], MODERATE)

    def test_late_week_needs_vegetarian(self):
        name, candidates = choose_candidates(4, self.groups, MODERATE, ProteinBalanceCounter(meat=4))
        self.assertEqual(name, "late_week")
        self.assertEqual(candidates, [self.fish, self.veg, self.vegan])

    def test_late_week_needs_fish(self):
        _, candidates = choose_candidates(5, self.groups, MODERATE, ProteinBalanceCounter(meat=2, vegetarian=2))
        self.assertEqual(candidates, [self.fish])

    def test_late_week_balanced_uses_pool(self):
        balance = ProteinBalanceCounter(meat=1, fish=1, vegetarian=2)
        _, candidates = choose_candidates(4, self.groups, MODERATE, balance)
        self.assertEqual(candidates, self.groups.dinners)

    def test_early_week_union(self):
        name, candidates = choose_candidates(2, self.groups, MODERATE, ProteinBalanceCounter())
        self.assertEqual(name, "early_week")
        self.assertEqual(candidates, [self.vegan, self.veg])

    def test_sunday_is_weekend(self):
        name, _ = choose_candidates(6, self.groups, COLD, ProteinBalanceCounter(meat=6))
        self.assertEqual(name, "weekend")


class TestSelectWithVariety(unittest.TestCase):

    def setUp(self):
        self.a = _recipe("A")
        self.b = _recipe("B")
        self.pool = [self.a, self.b]
        self.rng = FirstChoice()

    def test_unused_candidate_first(self):
        self.assertIs(select_with_variety([self.a, self.b], self.pool, {"A"}, self.rng), self.b)

    def test_falls_back_to_unused_pool(self):
        self.assertIs(select_with_variety([self.a], self.pool, {"A"}, self.rng), self.b)

    def test_all_used_repeats_candidate(self):
        self.assertIs(select_with_variety([self.b], self.pool, {"A", "B"}, self.rng), self.b)

    def test_all_used_no_candidates_uses_pool(self):
        self.assertIs(select_with_variety([], self.pool, {"A", "B"}, self.rng), self.a)

    def test_nothing_available(self):
        self.assertIsNone(select_with_variety([], [], set(), self.rng))


class TestVarietyResetThreshold(unittest.TestCase):

    def test_threshold(self):
        self.assertEqual(variety_reset_threshold(0), 0)
        self.assertEqual(variety_reset_threshold(1), 0)
        self.assertEqual(variety_reset_threshold(2), 1)
        self.assertEqual(variety_reset_threshold(5), 4)
        self.assertEqual(variety_reset_threshold(10), 8)
        self.assertEqual(variety_reset_threshold(15), 12)
