from pathlib import Path

# Centralized paths for data files (single source of truth)
DATA_DIR = (Path(__file__).parent.parent / 'data').resolve()
SAMPLE_RECIPES_FILE = DATA_DIR / 'sample_recipes.json'

__all__ = ['DATA_DIR', 'SAMPLE_RECIPES_FILE']
