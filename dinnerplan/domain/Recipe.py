"""Recipe domain entity: ingredients, timings, meal/protein type, tags, weather preference."""
from typing import Any, Dict, Iterable, List, Optional

from dinnerplan.utilities.constants import PLANNED_MEAL_TYPE


class Recipe:
    def __init__(self, id: Any = None, name: str = "", ingredients: Optional[Iterable[str]] = None,
                 prep_time: int = 0, cook_time: int = 0, meal_type: str = PLANNED_MEAL_TYPE,
                 protein_type: str = "vegetarian", dietary_tags: Optional[Iterable[str]] = None,
                 weather_preference: str = "any", servings: int = 0, instructions: str = ""):
        self.id = id if id is not None else name
        self.name = name
        self.ingredients = list(ingredients) if ingredients else []
        self.prep_time = prep_time or 0
        self.cook_time = cook_time or 0
        self.meal_type = meal_type
        self.protein_type = protein_type
        # Keep insertion order for display, membership is what matters
        self.dietary_tags = list(dict.fromkeys(dietary_tags)) if dietary_tags else []
        self.weather_preference = weather_preference
        self.servings = servings
        self.instructions = instructions

    def __str__(self) -> str:
        return (f"{self.name} - {self.protein_type} - {self.total_time} min - "
                f"Tags: {', '.join(self.dietary_tags)} - Weather: {self.weather_preference}")

    __repr__ = __str__

    @property
    def total_time(self) -> int:
        return self.prep_time + self.cook_time

    @property
    def is_dinner(self) -> bool:
        return self.meal_type == PLANNED_MEAL_TYPE

    def has_tag(self, tag: str) -> bool:
        return tag in self.dietary_tags

    @staticmethod
    def from_dict(data):
        '''Creates a Recipe from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        allowed = {"id", "name", "ingredients", "prep_time", "cook_time", "meal_type",
                   "protein_type", "dietary_tags", "weather_preference", "servings", "instructions"}
        filtered = {k: v for k, v in d.items() if k in allowed}
        return Recipe(**filtered)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "ingredients": list(self.ingredients),
            "prep_time": self.prep_time,
            "cook_time": self.cook_time,
            "meal_type": self.meal_type,
            "protein_type": self.protein_type,
            "dietary_tags": list(self.dietary_tags),
            "weather_preference": self.weather_preference,
            "servings": self.servings,
            "instructions": self.instructions,
        }

    def with_ingredients(self, ingredients: List[str]) -> "Recipe":
        '''Return a copy of this recipe with a different ingredient list.'''
        data = self.to_dict()
        data["ingredients"] = ingredients
        return Recipe.from_dict(data)
