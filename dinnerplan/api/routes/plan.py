import logging
import random
from typing import Tuple, List

from fastapi import APIRouter, Response

from dinnerplan.domain.Plan import Plan
from dinnerplan.domain.ShoppingList import ShoppingListEntry
from dinnerplan.domain.Weather import WeatherClassification
from dinnerplan.infra.Recipe_Repository import reading_sample_recipes
from dinnerplan.infra.Weather_Client import WeatherClient
from dinnerplan.infra.pdf_utils import generate_pdf_for_plan
from dinnerplan.logic.planning.plan_builder import build_plan
from dinnerplan.logic.reporting.summary import compute_plan_summary
from dinnerplan.logic.shopping.list_builder import build_shopping_list, format_shopping_list_text
from dinnerplan.utilities.validators import MealPlanRequest

router = APIRouter(prefix="/api/meal-plan")
logger = logging.getLogger(__name__)


def get_weather_client() -> WeatherClient:
    return WeatherClient()


def resolve_weather(payload: MealPlanRequest) -> WeatherClassification:
    """Explicit weather, then explicit temperature, then the weather service."""
    if payload.weather is not None:
        return payload.weather.to_weather()
    if payload.temperature is not None:
        return WeatherClassification.from_temperature(payload.temperature)
    return get_weather_client().current_weather()


def _generate(payload: MealPlanRequest) -> Tuple[Plan, List[ShoppingListEntry], WeatherClassification]:
    if payload.recipes is not None:
        recipes = [r.to_recipe() for r in payload.recipes]
    else:
        recipes = reading_sample_recipes()
    weather = resolve_weather(payload)
    rng = random.Random(payload.seed) if payload.seed is not None else None
    logger.info("Generating meal plan from %d recipes (%s weather)", len(recipes), weather.label)
    plan = build_plan(recipes, weather, rng=rng)
    return plan, build_shopping_list(plan), weather


@router.post("")
@router.post("/")
def generate_meal_plan(payload: MealPlanRequest):
    """Return the week's dinners, the shopping list and the weather used."""
    plan, shopping_list, weather = _generate(payload)
    return {
        "meal_plan": [day.to_dict() for day in plan],
        "shopping_list": [entry.to_dict() for entry in shopping_list],
        "weather": weather.to_dict(),
        "protein_balance": plan.protein_balance.to_dict(),
        "summary": compute_plan_summary(plan),
    }


@router.post("/pdf")
def export_pdf(payload: MealPlanRequest):
    plan, shopping_list, weather = _generate(payload)
    pdf_bytes = generate_pdf_for_plan(plan, shopping_list, weather)

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": "attachment; filename=dinner_plan.pdf"
        },
    )


@router.post("/shopping-list.txt")
def export_shopping_list_text(payload: MealPlanRequest):
    """Plain-text shopping list, one ingredient per line, ready to paste into a notes app."""
    _, shopping_list, _ = _generate(payload)
    return Response(content=format_shopping_list_text(shopping_list), media_type="text/plain")
