"""
Core system module for the proficiency engine.

This module contains the constants, validation helpers, logging setup and
string utilities shared by every other part of the engine.
"""

from .constants import (
    CANNOT_PERFORM,
    DEFAULT_RITUAL_BASE_SKILL,
    GENERIC_DEFAULT_PENALTY,
    RITUAL_MAGIC_LIMIT_MODIFIER,
    SKILL_NAME_ID,
    SPELL_COLLEGE_ID,
    SPELL_NAME_ID,
    SPELL_POWER_SOURCE_ID,
    TECHNIQUE_DIFFICULTIES,
    Difficulty,
    NiceEnum,
)
from .error_handling import (
    InvalidInput,
    require_difficulty,
    require_non_empty_string,
    require_non_negative_int,
)
from .logging import get_logger, setup_logging
from .utils import fold, with_sign

__all__ = [
    # Import from constants.py
    "CANNOT_PERFORM",
    "DEFAULT_RITUAL_BASE_SKILL",
    "GENERIC_DEFAULT_PENALTY",
    "RITUAL_MAGIC_LIMIT_MODIFIER",
    "SKILL_NAME_ID",
    "SPELL_COLLEGE_ID",
    "SPELL_NAME_ID",
    "SPELL_POWER_SOURCE_ID",
    "TECHNIQUE_DIFFICULTIES",
    "Difficulty",
    "NiceEnum",
    # Import from error_handling.py
    "InvalidInput",
    "require_difficulty",
    "require_non_empty_string",
    "require_non_negative_int",
    # Import from logging.py
    "get_logger",
    "setup_logging",
    # Import from utils.py
    "fold",
    "with_sign",
]
