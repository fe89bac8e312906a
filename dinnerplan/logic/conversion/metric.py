"""Imperial to metric ingredient conversion.

Rewrites "<amount> <unit>" fragments of free-text ingredient lines into
metric quantities ("2 cups flour" -> "480ml flour", "1 lb butter" -> "454g butter")
and turns counted items with a known typical weight into grams
("2 onions" -> "300g onion"). Anything not recognized is left as written.

Rounding:
    - volume is reported in ml, or L from 1000 ml upwards (one decimal)
    - weight is reported in g, or kg from 1000 g upwards (one decimal)
    - amounts below 50 round to the nearest 5, larger ones to the nearest unit
"""
import logging
import math
import re
from typing import Dict, Optional, Tuple

logger = logging.getLogger(__name__)

# Lookup keys are lower case with spaces and dots removed ("fl. oz" -> "floz")
VOLUME_TO_ML: Dict[str, float] = {
    'cup': 240, 'cups': 240, 'c': 240,
    'tbsp': 15, 'tablespoon': 15, 'tablespoons': 15, 'tbsps': 15, 'tbs': 15,
    'tsp': 5, 'teaspoon': 5, 'teaspoons': 5, 'tsps': 5, 'ts': 5,
    'floz': 30, 'fluidounce': 30, 'fluidounces': 30,
    'pint': 473, 'pints': 473, 'pt': 473,
    'quart': 946, 'quarts': 946, 'qt': 946,
    'gallon': 3785, 'gallons': 3785, 'gal': 3785,
}

WEIGHT_TO_G: Dict[str, float] = {
    'oz': 28.35, 'ounce': 28.35, 'ounces': 28.35, 'ozs': 28.35,
    'lb': 453.6, 'lbs': 453.6, 'pound': 453.6, 'pounds': 453.6, 'lbm': 453.6,
    'stick': 113, 'sticks': 113,  # stick of butter
    'packet': 7, 'packets': 7, 'envelope': 7, 'envelopes': 7,
}

# Typical weight of one counted item -> (grams, name kept in the output).
# Sized variants come first so "2 large eggs" is not caught by "egg".
INGREDIENT_DEFAULTS: Dict[str, Tuple[int, str]] = {
    'large egg': (60, 'egg'), 'medium egg': (50, 'egg'), 'small egg': (40, 'egg'), 'egg': (50, 'egg'),
    'large onion': (200, 'onion'), 'medium onion': (150, 'onion'), 'small onion': (100, 'onion'),
    'onion': (150, 'onion'),
    'large carrot': (100, 'carrot'), 'medium carrot': (75, 'carrot'), 'small carrot': (50, 'carrot'),
    'carrot': (75, 'carrot'),
    'large potato': (300, 'potato'), 'medium potato': (200, 'potato'), 'small potato': (100, 'potato'),
    'potato': (200, 'potato'),
    'large apple': (200, 'apple'), 'medium apple': (150, 'apple'), 'small apple': (100, 'apple'),
    'apple': (150, 'apple'),
    'clove of garlic': (3, 'garlic'), 'clove garlic': (3, 'garlic'), 'garlic clove': (3, 'garlic'),
}

_AMOUNT = (
    r"\d+(?:[.,]\d+)?\s*-\s*\d+(?:[.,]\d+)?"  # range, 2-3
    r"|\d+\s+\d+/\d+"                          # mixed number, 1 1/2
    r"|\d+/\d+"                                # fraction, 1/2
    r"|\d+(?:[.,]\d+)?"                        # integer or decimal
)
_UNIT = (
    r"fluid\s*ounces|fluid\s*ounce|fl\.?\s*oz|floz"
    r"|tablespoons|tablespoon|tbsps|tbsp|tbs"
    r"|teaspoons|teaspoon|tsps|tsp|ts"
    r"|gallons|gallon|gal|quarts|quart|qt|pints|pint|pt|cups|cup|c"
    r"|ounces|ounce|ozs|oz|pounds|pound|lbs|lbm|lb"
    r"|sticks|stick|packets|packet|envelopes|envelope"
)
MEASUREMENT_RE = re.compile(rf"(?<![\d./,])({_AMOUNT})\s*({_UNIT})\b", re.IGNORECASE)

_DEFAULT_RES = [
    (re.compile(rf"(?<![\d./,])(\d+)\s+{re.escape(key)}(?:e?s)?\b", re.IGNORECASE), grams, name)
    for key, (grams, name) in INGREDIENT_DEFAULTS.items()
]


def _round_half_up(value: float, step: int = 1) -> float:
    return math.floor(value / step + 0.5) * step


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def parse_amount(text: str) -> Optional[float]:
    """Evaluate "2", "1.5", "1,5", "1/2", "1 1/2" or "2-3" (averaged). None if malformed."""
    text = text.replace(',', '.').strip()
    try:
        if '-' in text:
            low, high = (float(part) for part in text.split('-'))
            return (low + high) / 2
        if '/' in text:
            parts = text.split()
            whole = float(parts[0]) if len(parts) == 2 else 0.0
            numerator, denominator = parts[-1].split('/')
            return whole + float(numerator) / float(denominator)
        return float(text)
    except (ValueError, ZeroDivisionError):
        return None


def format_metric(amount: float, small_unit: str, large_unit: str) -> str:
    """Render an amount in the small unit, switching to the large one from 1000 up."""
    if amount >= 1000:
        return f"{_format_number(_round_half_up(amount / 1000 * 10) / 10)}{large_unit}"
    if amount < 50:
        return f"{_format_number(_round_half_up(amount, 5))}{small_unit}"
    return f"{_format_number(_round_half_up(amount))}{small_unit}"


def _unit_key(unit: str) -> str:
    return re.sub(r"[\s.]", "", unit.lower())


def _convert_measurement(match: re.Match) -> str:
    amount_text, unit = match.group(1), match.group(2)
    key = _unit_key(unit)
    amount = parse_amount(amount_text)
    if amount is None:
        return match.group(0)
    if key in VOLUME_TO_ML:
        return format_metric(amount * VOLUME_TO_ML[key], 'ml', 'L')
    if key in WEIGHT_TO_G:
        return format_metric(amount * WEIGHT_TO_G[key], 'g', 'kg')
    return match.group(0)


def convert_ingredient_to_metric(ingredient: str) -> str:
    """Convert imperial quantities in a free-text ingredient line to metric."""
    if not isinstance(ingredient, str):
        ingredient = "" if ingredient is None else str(ingredient)
    converted = ingredient.strip()

    for pattern, grams, name in _DEFAULT_RES:
        converted = pattern.sub(lambda m, g=grams, n=name: f"{int(m.group(1)) * g}g {n}", converted)

    converted = MEASUREMENT_RE.sub(_convert_measurement, converted)
    # Clean up any double spaces created by the substitutions
    return re.sub(r"\s+", " ", converted).strip()


def normalize_ingredient(raw: str) -> str:
    """Shopping-list key: metric conversion, then case-folded and trimmed."""
    return convert_ingredient_to_metric(raw).casefold().strip()


def convert_recipe_to_metric(recipe):
    """Return a copy of the recipe with every ingredient converted; the input is left untouched."""
    converted = [convert_ingredient_to_metric(ing) for ing in recipe.ingredients]
    if converted != recipe.ingredients:
        logger.debug("Converted %s to metric", recipe.name)
    return recipe.with_ingredients(converted)


__all__ = [
    'convert_ingredient_to_metric', 'normalize_ingredient', 'convert_recipe_to_metric',
    'parse_amount', 'format_metric', 'VOLUME_TO_ML', 'WEIGHT_TO_G', 'INGREDIENT_DEFAULTS',
]
