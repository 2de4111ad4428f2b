"""Configuration management for the MealPrep backend."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Nutritionix API
NUTRITIONIX_APP_ID: Final[str] = os.getenv('NUTRITIONIX_APP_ID', '')
NUTRITIONIX_APP_KEY: Final[str] = os.getenv('NUTRITIONIX_APP_KEY', '')
NUTRITIONIX_BASE_URL: Final[str] = os.getenv('NUTRITIONIX_BASE_URL', 'https://trackapi.nutritionix.com/v2')

# OpenAI
OPENAI_API_KEY: Final[str] = os.getenv('OPENAI_API_KEY', '')
OPENAI_MODEL: Final[str] = os.getenv('OPENAI_MODEL', 'gpt-4o-mini')

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()
HTTP_TIMEOUT: Final[float] = float(os.getenv('HTTP_TIMEOUT', '30'))

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('DATA_DIR', str(BASE_DIR / 'data')))
