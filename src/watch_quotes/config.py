"""
Configuration management for the watch quote extractor.

Loads settings from environment variables with sensible defaults.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env file from project root
_project_root = Path(__file__).parent.parent.parent
_env_file = _project_root / '.env'
if _env_file.exists():
    load_dotenv(_env_file)


def _env_flag(name: str, default: str = 'false') -> bool:
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Configuration settings loaded from environment."""

    # Logging
    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')
    LOG_JSON: bool = _env_flag('LOG_JSON')

    # Extraction
    # Prefixed onto bare 8-digit local numbers found by the phone extractor
    DEFAULT_COUNTRY_CODE: str = os.getenv('DEFAULT_COUNTRY_CODE', '+852')

    @classmethod
    def validate(cls) -> list[str]:
        """
        Validate configuration values.

        Returns:
            List of configuration keys holding invalid values
        """
        invalid = []
        if not cls.DEFAULT_COUNTRY_CODE.startswith('+') or not cls.DEFAULT_COUNTRY_CODE[1:].isdigit():
            invalid.append('DEFAULT_COUNTRY_CODE')
        if cls.LOG_LEVEL.upper() not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            invalid.append('LOG_LEVEL')
        return invalid


# Singleton config instance
config = Config()
