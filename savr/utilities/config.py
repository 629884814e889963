"""Configuration management for the Savr backend."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

from savr.utilities.constants import DEFAULT_MAX_RECIPES

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# Meal generation
MAX_GENERATED_MEALS: Final[int] = int(os.getenv('MAX_GENERATED_MEALS', str(DEFAULT_MAX_RECIPES)))

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('DATA_DIR', str(BASE_DIR / 'data')))
PROFILE_STORE_FILE: Final[Path] = Path(os.getenv('PROFILE_STORE_FILE', str(DATA_DIR / 'profiles.json')))
RECIPE_CATALOG_FILE: Final[Path] = Path(os.getenv('RECIPE_CATALOG_FILE', str(DATA_DIR / 'recipe_catalog.json')))
FOOD_CATALOG_FILE: Final[Path] = Path(os.getenv('FOOD_CATALOG_FILE', str(DATA_DIR / 'food_catalog.json')))
