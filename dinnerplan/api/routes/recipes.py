from fastapi import APIRouter

from dinnerplan.infra.Recipe_Repository import reading_sample_recipes
from dinnerplan.logic.conversion.metric import convert_ingredient_to_metric, convert_recipe_to_metric
from dinnerplan.utilities.validators import ConvertRequest

router = APIRouter(prefix="/api")


@router.get("/recipes/sample")
def list_sample_recipes(metric: bool = False):
    """Return the bundled sample recipes, optionally with metric ingredients."""
    recipes = reading_sample_recipes()
    if metric:
        recipes = [convert_recipe_to_metric(r) for r in recipes]
    return {"recipes": [r.to_dict() for r in recipes], "count": len(recipes)}


@router.post("/convert")
def convert_ingredients(payload: ConvertRequest):
    """Convert free-text ingredient lines to metric units."""
    return {"converted": [convert_ingredient_to_metric(ing) for ing in payload.ingredients]}
