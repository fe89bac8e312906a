"""Weather classification consumed by the plan builder."""
from typing import Any, Dict, Optional

from dinnerplan.utilities.config import COLD_THRESHOLD_C, DEFAULT_TEMPERATURE_C, HOT_THRESHOLD_C


class WeatherClassification:
    def __init__(self, is_hot: bool = False, is_cold: bool = False, temperature: Optional[float] = None):
        # Not enforced to be exclusive, both False means moderate
        self.is_hot = bool(is_hot)
        self.is_cold = bool(is_cold)
        self.temperature = temperature

    @property
    def label(self) -> str:
        if self.is_hot:
            return "hot"
        if self.is_cold:
            return "cold"
        return "moderate"

    @classmethod
    def from_temperature(cls, temperature: float, *, hot_above: float = HOT_THRESHOLD_C,
                         cold_below: float = COLD_THRESHOLD_C) -> "WeatherClassification":
        return cls(is_hot=temperature > hot_above, is_cold=temperature < cold_below, temperature=temperature)

    @classmethod
    def moderate(cls) -> "WeatherClassification":
        return cls(temperature=DEFAULT_TEMPERATURE_C)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_hot": self.is_hot,
            "is_cold": self.is_cold,
            "temperature": self.temperature,
            "label": self.label,
        }

    def __str__(self) -> str:
        if self.temperature is None:
            return f"{self.label.capitalize()} weather"
        return f"{self.temperature}°C - {self.label.capitalize()} weather"

    __repr__ = __str__
