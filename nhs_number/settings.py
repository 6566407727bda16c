"""
Centralized configuration for nhs_number.

Values come from the environment, falling back to a .env file found from
the working directory. The .env file is only read; its keys are never
copied into os.environ.
"""

import logging
import os
from typing import Optional

from dotenv import dotenv_values, find_dotenv

_dotenv_path = find_dotenv(usecwd=True)
_dotenv = dotenv_values(_dotenv_path) if _dotenv_path else {}


def _get(key: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(key) or _dotenv.get(key) or default


# --- Logging ---
LOG_LEVEL = _get("NHS_NUMBER_LOG_LEVEL", "WARNING").upper()

# --- Sampling ---
_seed = _get("NHS_NUMBER_RANDOM_SEED")
RANDOM_SEED: Optional[int] = int(_seed) if _seed else None


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Apply LOG_LEVEL (or ``level``) to the package logger and return it."""
    logger = logging.getLogger("nhs_number")
    logger.setLevel((level or LOG_LEVEL).upper())
    return logger
