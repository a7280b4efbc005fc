"""
Statusbot Application Bootstrap

Loads environment variables from .env files and configures logging.
Imported by every transport (API, CLI) before settings are read.
"""

from pathlib import Path

from dotenv import load_dotenv

from statusbot.config import get_settings
from statusbot.logging_config import setup_logging

# src/statusbot/app.py -> project root
project_root = Path(__file__).parent.parent.parent
env_file = project_root / ".env"
env_local_file = project_root / ".env.local"

# Load .env first, then .env.local (which can override)
if env_file.exists():
    load_dotenv(env_file, override=False)
if env_local_file.exists():
    load_dotenv(env_local_file, override=True)

settings = get_settings()
logger = setup_logging(
    'statusbot',
    log_level=settings.LOG_LEVEL,
    log_format=settings.LOG_FORMAT,
    log_file=settings.LOG_FILE,
)
