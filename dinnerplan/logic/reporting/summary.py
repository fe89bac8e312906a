"""Plan summary for the API and exports."""
from collections import Counter
from typing import Any, Dict

from dinnerplan.domain.Plan import Plan


def compute_plan_summary(plan: Plan) -> Dict[str, Any]:
    """Aggregate per-day cooking time and weekly protein / tag stats.

    Returns structure:
    {
      'days': { 'Monday': {'dinner': str | None, 'minutes': int, 'protein_type': str | None, 'strategy': str}, ... },
      'week_totals': { 'dinners': int, 'minutes': int },
      'protein_balance': { 'meat': int, 'fish': int, 'vegetarian': int },
      'tags': { tag: count, ... }
    }
    """
    if not plan:
        return {'days': {}, 'week_totals': {'dinners': 0, 'minutes': 0},
                'protein_balance': {'meat': 0, 'fish': 0, 'vegetarian': 0}, 'tags': {}}

    days_result = {}
    tags: Counter = Counter()
    total_minutes = 0
    for day in plan:
        dinner = day.dinner
        minutes = dinner.total_time if dinner else 0
        days_result[day.day_name] = {
            'dinner': dinner.name if dinner else None,
            'minutes': minutes,
            'protein_type': dinner.protein_type if dinner else None,
            'strategy': day.strategy,
        }
        total_minutes += minutes
        if dinner:
            tags.update(dinner.dietary_tags)

    return {
        'days': days_result,
        'week_totals': {'dinners': len(plan.dinners()), 'minutes': total_minutes},
        'protein_balance': plan.protein_balance.to_dict(),
        'tags': dict(tags.most_common()),
    }


__all__ = ["compute_plan_summary"]
