import json
import logging
from pathlib import Path
from typing import List, Optional

from dinnerplan.domain.Recipe import Recipe
from dinnerplan.infra.paths import SAMPLE_RECIPES_FILE

logger = logging.getLogger(__name__)


def reading_sample_recipes(path: Optional[Path] = None) -> List[Recipe]:
    """Read the bundled sample recipes, returning an empty list if the file is unusable."""
    path = path or SAMPLE_RECIPES_FILE
    try:
        with open(path, 'r', encoding='utf-8') as f:
            recipes_data = json.load(f)
    except FileNotFoundError:
        logger.warning("Sample recipes file not found: %s. Returning empty list.", path)
        return []
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in sample recipes file: %s", e)
        return []
    if not isinstance(recipes_data, list):
        logger.error("Sample recipes file %s does not hold a list", path)
        return []
    return [Recipe.from_dict(entry) for entry in recipes_data if isinstance(entry, dict)]
