"""Running protein tally used while a plan is built."""
from typing import Dict


class ProteinBalanceCounter:
    def __init__(self, meat: int = 0, fish: int = 0, vegetarian: int = 0):
        self.meat = meat
        self.fish = fish
        self.vegetarian = vegetarian

    @property
    def total(self) -> int:
        return self.meat + self.fish + self.vegetarian

    def record(self, recipe) -> None:
        '''Count a selected recipe: meat, fish, anything else as vegetarian.'''
        if recipe.protein_type == "meat":
            self.meat += 1
        elif recipe.protein_type == "fish":
            self.fish += 1
        else:
            self.vegetarian += 1

    def ratios(self) -> Dict[str, float]:
        total = max(1, self.total)
        return {
            "meat": self.meat / total,
            "fish": self.fish / total,
            "vegetarian": self.vegetarian / total,
        }

    def copy(self) -> "ProteinBalanceCounter":
        return ProteinBalanceCounter(self.meat, self.fish, self.vegetarian)

    def to_dict(self) -> Dict[str, int]:
        return {"meat": self.meat, "fish": self.fish, "vegetarian": self.vegetarian}

    def __str__(self) -> str:
        return f"Protein balance - meat: {self.meat}, fish: {self.fish}, vegetarian: {self.vegetarian}"

    __repr__ = __str__
