from fastapi import FastAPI
import logging

from dinnerplan.api.routes import plan, recipes
from dinnerplan.utilities.config import DEBUG

# Logging
logger = logging.getLogger("dinnerplan_app")
logging.basicConfig(level=logging.DEBUG if DEBUG else logging.INFO)

# Initialize FastAPI app
app = FastAPI(title="Weekly Dinner Planner API")

# Include routers
app.include_router(plan.router)
app.include_router(recipes.router)


@app.on_event("startup")
def _startup_log():
    client = plan.get_weather_client()
    if client.enabled:
        logger.info("Weather lookups enabled for %s", client.city)
    else:
        logger.info("OPENWEATHER_API_KEY not set; planning with default moderate weather")


# -------------------- API: Weather --------------------
@app.get("/api/weather")
def api_weather():
    """Return the weather classification a new plan would use."""
    return plan.get_weather_client().current_weather().to_dict()


@app.get("/health")
def health():
    return {"status": "ok"}
