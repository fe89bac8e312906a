"""Shopping list builder.

Provides build_shopping_list(plan) and format_shopping_list_text(entries).
"""
from typing import Dict, Iterable, List

from dinnerplan.domain.Plan import Plan
from dinnerplan.domain.ShoppingList import ShoppingListEntry
from dinnerplan.logic.conversion.metric import normalize_ingredient


def build_shopping_list(plan: Plan) -> List[ShoppingListEntry]:
    """Collect the ingredients of every planned dinner.

    Each ingredient line is normalized (metric conversion, case-folded, trimmed)
    and counted once per occurrence; quantities are part of the text and are
    never summed.

    Returns:
        Entries in first-seen order: { ingredient, frequency }.
    """
    if not plan:
        return []

    counts: Dict[str, int] = {}
    for day in plan:
        if day.dinner is None:
            continue
        for ingredient in day.dinner.ingredients or []:
            key = normalize_ingredient(ingredient)
            if not key:
                continue
            counts[key] = counts.get(key, 0) + 1

    return [ShoppingListEntry(ingredient, frequency) for ingredient, frequency in counts.items()]


def format_shopping_list_text(entries: Iterable[ShoppingListEntry]) -> str:
    """One line per entry, "(Nx)" appended when more than one dinner needs it."""
    return "\n".join(str(entry) for entry in entries)


__all__ = ['build_shopping_list', 'format_shopping_list_text']
