import random
import unittest

from dinnerplan.domain.Plan import DayPlan, Plan
from dinnerplan.domain.ProteinBalance import ProteinBalanceCounter
from dinnerplan.domain.Recipe import Recipe
from dinnerplan.domain.Weather import WeatherClassification
from dinnerplan.infra.Recipe_Repository import reading_sample_recipes
from dinnerplan.infra.pdf_utils import generate_pdf_for_plan
from dinnerplan.logic.planning.plan_builder import build_plan
from dinnerplan.logic.reporting.summary import compute_plan_summary
from dinnerplan.logic.shopping.list_builder import build_shopping_list
from dinnerplan.utilities.constants import DAY_NAMES


class TestPlanSummary(unittest.TestCase):

    def test_summary_totals(self):
        stir_fry = Recipe(id=2, name="Chicken Stir Fry", prep_time=10, cook_time=15,
                          protein_type="meat", dietary_tags=["quick", "healthy"])
        pasta = Recipe(id=3, name="Vegetable Pasta", prep_time=10, cook_time=20,
                       protein_type="vegetarian", dietary_tags=["kid-friendly"])
        balance = ProteinBalanceCounter(meat=1, vegetarian=1)
        days = [DayPlan(name) for name in DAY_NAMES]
        days[0].dinner, days[0].strategy = stir_fry, "weekend"
        days[3].dinner, days[3].strategy = pasta, "early_week"
        summary = compute_plan_summary(Plan(days, balance))

        self.assertEqual(summary['week_totals'], {'dinners': 2, 'minutes': 55})
        self.assertEqual(summary['days']['Monday']['dinner'], "Chicken Stir Fry")
        self.assertEqual(summary['days']['Tuesday']['dinner'], None)
        self.assertEqual(summary['days']['Thursday']['strategy'], "early_week")
        self.assertEqual(summary['protein_balance'], {'meat': 1, 'fish': 0, 'vegetarian': 1})
        self.assertEqual(summary['tags'], {'quick': 1, 'healthy': 1, 'kid-friendly': 1})

    def test_summary_of_nothing(self):
        self.assertEqual(compute_plan_summary(None)['week_totals'], {'dinners': 0, 'minutes': 0})


class TestPdfExport(unittest.TestCase):

    def test_pdf_bytes(self):
        plan = build_plan(reading_sample_recipes(), WeatherClassification.from_temperature(25), rng=random.Random(1))
        pdf = generate_pdf_for_plan(plan, build_shopping_list(plan), WeatherClassification.from_temperature(25))
        self.assertTrue(pdf.startswith(b'%PDF'))

    def test_pdf_for_empty_plan(self):
        plan = build_plan([])
        self.assertTrue(generate_pdf_for_plan(plan, []).startswith(b'%PDF'))
