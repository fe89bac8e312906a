"""Plan domain entities: one DayPlan per weekday, Monday to Sunday."""
from typing import Any, Dict, Iterator, List, Optional

from dinnerplan.domain.ProteinBalance import ProteinBalanceCounter
from dinnerplan.domain.Recipe import Recipe


class DayPlan:
    def __init__(self, day_name: str, dinner: Optional[Recipe] = None, strategy: str = ""):
        self.day_name = day_name
        self.dinner = dinner
        self.strategy = strategy

    @property
    def has_dinner(self) -> bool:
        return self.dinner is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "day": self.day_name,
            "dinner": self.dinner.to_dict() if self.dinner else None,
            "strategy": self.strategy,
        }

    def __str__(self) -> str:
        return f"{self.day_name}: {self.dinner.name if self.dinner else '-'}"

    __repr__ = __str__


class Plan:
    def __init__(self, days: List[DayPlan], protein_balance: Optional[ProteinBalanceCounter] = None):
        self.days = list(days)
        self.protein_balance = protein_balance or ProteinBalanceCounter()

    def __iter__(self) -> Iterator[DayPlan]:
        return iter(self.days)

    def __len__(self) -> int:
        return len(self.days)

    def __getitem__(self, index: int) -> DayPlan:
        return self.days[index]

    def dinners(self) -> List[Recipe]:
        return [d.dinner for d in self.days if d.dinner is not None]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "days": [d.to_dict() for d in self.days],
            "protein_balance": self.protein_balance.to_dict(),
        }

    def __str__(self) -> str:
        return "Plan [" + ", ".join(str(d) for d in self.days) + "]"

    __repr__ = __str__
