"""Current-weather lookup used to classify the planning week as hot, cold or moderate.

The lookup never fails the caller: without an API key, on HTTP errors or on an
unexpected payload the default moderate classification is returned.
"""
import logging
from typing import Optional

import httpx

from dinnerplan.domain.Weather import WeatherClassification
from dinnerplan.utilities.config import (
    OPENWEATHER_API_KEY, OPENWEATHER_URL, WEATHER_CITY, WEATHER_TIMEOUT
)

logger = logging.getLogger(__name__)


class WeatherClient:
    def __init__(self, api_key: str = OPENWEATHER_API_KEY, city: str = WEATHER_CITY,
                 url: str = OPENWEATHER_URL, timeout: float = WEATHER_TIMEOUT,
                 transport: Optional[httpx.BaseTransport] = None):
        self.api_key = api_key
        self.city = city
        self.url = url
        self.timeout = timeout
        self._transport = transport

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)

    def fetch_temperature(self) -> Optional[float]:
        """Return the current temperature in Celsius, or None if unavailable."""
        if not self.enabled:
            return None
        params = {"q": self.city, "appid": self.api_key, "units": "metric"}
        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.get(self.url, params=params)
                response.raise_for_status()
                data = response.json()
            return float(data["main"]["temp"])
        except httpx.HTTPError as e:
            logger.warning("Weather lookup for %s failed: %s", self.city, e)
        except (ValueError, KeyError, TypeError) as e:
            logger.warning("Unexpected weather payload for %s: %s", self.city, e)
        return None

    def current_weather(self) -> WeatherClassification:
        temperature = self.fetch_temperature()
        if temperature is None:
            logger.info("Using default weather data")
            return WeatherClassification.moderate()
        return WeatherClassification.from_temperature(temperature)
