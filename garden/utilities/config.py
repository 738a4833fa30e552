"""Configuration management for the Garden Planner application."""
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
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '5000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'INFO').upper()

# Client Settings
GARDEN_API_URL: Final[str] = os.getenv('GARDEN_API_URL', f'http://localhost:{APP_PORT}/api')
GARDEN_API_TIMEOUT: Final[float] = float(os.getenv('GARDEN_API_TIMEOUT', '10'))

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('GARDEN_DATA_DIR', str(BASE_DIR / 'data'))).resolve()
