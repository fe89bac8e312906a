"""Configuration management for the dinner planner application."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'

# Weather service (empty key disables the lookup)
OPENWEATHER_API_KEY: Final[str] = os.getenv('OPENWEATHER_API_KEY', '')
OPENWEATHER_URL: Final[str] = os.getenv('OPENWEATHER_URL', 'https://api.openweathermap.org/data/2.5/weather')
WEATHER_CITY: Final[str] = os.getenv('WEATHER_CITY', 'London')
WEATHER_TIMEOUT: Final[float] = float(os.getenv('WEATHER_TIMEOUT', '5'))

# Temperature classification (Celsius)
HOT_THRESHOLD_C: Final[float] = float(os.getenv('HOT_THRESHOLD_C', '20'))
COLD_THRESHOLD_C: Final[float] = float(os.getenv('COLD_THRESHOLD_C', '10'))
DEFAULT_TEMPERATURE_C: Final[float] = float(os.getenv('DEFAULT_TEMPERATURE_C', '15'))
