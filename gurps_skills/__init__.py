"""
Proficiency engine for GURPS character sheets.

Computes the level of skills, techniques and spells from invested points,
attribute scores and situational bonuses, including the Ritual Magic
defaulting rules.
"""

from .character import CharacterSheet
from .context import Context, LiveContext, TemplateContext, is_live
from .core import CANNOT_PERFORM, Difficulty, InvalidInput, setup_logging
from .features import (
    Bonus,
    BonusAggregator,
    BonusResult,
    FeatureBonusAggregator,
    StringCompareType,
    StringCriteria,
)
from .interfaces import AttributeSource, SkillSource
from .skills import (
    DefaultReference,
    Skill,
    SkillLevel,
    Technique,
    format_relative_level,
    format_technique_level,
    points_for_next_level,
    points_for_previous_level,
    points_to_relative_level,
    resolve_level,
    resolve_technique_level,
)
from .spells import DefaultStrategy, RitualMagicSpell, Spell, resolve_ritual_magic_level

__all__ = [
    # Import from character
    "CharacterSheet",
    # Import from context.py
    "Context",
    "LiveContext",
    "TemplateContext",
    "is_live",
    # Import from core
    "CANNOT_PERFORM",
    "Difficulty",
    "InvalidInput",
    "setup_logging",
    # Import from features
    "Bonus",
    "BonusAggregator",
    "BonusResult",
    "FeatureBonusAggregator",
    "StringCompareType",
    "StringCriteria",
    # Import from interfaces.py
    "AttributeSource",
    "SkillSource",
    # Import from skills
    "DefaultReference",
    "Skill",
    "SkillLevel",
    "Technique",
    "format_relative_level",
    "format_technique_level",
    "points_for_next_level",
    "points_for_previous_level",
    "points_to_relative_level",
    "resolve_level",
    "resolve_technique_level",
    # Import from spells
    "DefaultStrategy",
    "RitualMagicSpell",
    "Spell",
    "resolve_ritual_magic_level",
]
