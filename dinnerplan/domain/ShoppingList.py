"""Shopping list entry: a normalized ingredient and how many dinners use it."""
from typing import Any, Dict


class ShoppingListEntry:
    def __init__(self, ingredient: str, frequency: int = 1):
        self.ingredient = ingredient
        self.frequency = frequency

    def to_dict(self) -> Dict[str, Any]:
        return {"ingredient": self.ingredient, "frequency": self.frequency}

    def __eq__(self, other) -> bool:
        if not isinstance(other, ShoppingListEntry):
            return NotImplemented
        return self.ingredient == other.ingredient and self.frequency == other.frequency

    def __str__(self) -> str:
        '''Display line, e.g. "480ml milk (2x)".'''
        if self.frequency > 1:
            return f"{self.ingredient} ({self.frequency}x)"
        return self.ingredient

    def __repr__(self) -> str:
        return f"ShoppingListEntry({self.ingredient!r}, {self.frequency})"
