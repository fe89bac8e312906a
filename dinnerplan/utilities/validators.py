"""
Input validation schemas using Pydantic for the HTTP layer.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional, Union

from dinnerplan.domain.Recipe import Recipe
from dinnerplan.domain.Weather import WeatherClassification


class RecipeInput(BaseModel):
    """Schema for a candidate recipe."""
    id: Optional[Union[int, str]] = None
    name: str = Field(..., min_length=1, max_length=200)
    ingredients: List[str] = Field(default_factory=list)
    prep_time: int = Field(0, ge=0)
    cook_time: int = Field(0, ge=0)
    meal_type: str = Field("dinner", pattern=r'^(breakfast|dinner)$')
    protein_type: str = Field("vegetarian", pattern=r'^(meat|fish|vegetarian|vegan)$')
    dietary_tags: List[str] = Field(default_factory=list)
    weather_preference: str = Field("any", pattern=r'^(hot|cold|any)$')
    servings: int = Field(0, ge=0)
    instructions: str = ""

    @field_validator('name')
    @classmethod
    def strip_name(cls, v):
        """Remove leading/trailing whitespace."""
        if not v.strip():
            raise ValueError('Recipe name cannot be empty')
        return v.strip()

    @field_validator('ingredients')
    @classmethod
    def drop_blank_ingredients(cls, v):
        return [ing.strip() for ing in v if ing and ing.strip()]

    @field_validator('dietary_tags')
    @classmethod
    def validate_tags(cls, v):
        """Ensure tags are non-empty, lower-case strings."""
        return [tag.strip().lower() for tag in v if tag and tag.strip()]

    def to_recipe(self) -> Recipe:
        return Recipe.from_dict(self.model_dump())


class WeatherInput(BaseModel):
    """Schema for an explicit weather classification."""
    is_hot: bool = False
    is_cold: bool = False
    temperature: Optional[float] = None

    def to_weather(self) -> WeatherClassification:
        return WeatherClassification(self.is_hot, self.is_cold, self.temperature)


class MealPlanRequest(BaseModel):
    """Schema for plan generation: recipes and weather are optional."""
    recipes: Optional[List[RecipeInput]] = None
    weather: Optional[WeatherInput] = None
    temperature: Optional[float] = Field(None, ge=-90, le=60)
    seed: Optional[int] = None

    @field_validator('recipes')
    @classmethod
    def unique_ids(cls, v):
        """Recipe ids (or names where no id is given) must be unique."""
        if v is None:
            return v
        keys = [r.id if r.id is not None else r.name for r in v]
        if len(keys) != len(set(keys)):
            raise ValueError('Recipe ids must be unique')
        return v


class ConvertRequest(BaseModel):
    """Schema for ingredient conversion."""
    ingredients: List[str] = Field(..., min_length=1)
