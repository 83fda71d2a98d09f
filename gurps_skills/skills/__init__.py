"""
Skill resolution for the proficiency engine.

Contains the point cost curve, the level resolvers for skills trained against
an attribute and for techniques defaulting from a base skill, and the skill
models a character sheet holds.
"""

from .display import format_relative_level, format_technique_level
from .level_resolver import resolve_level, skill_bonus_keys, spell_bonus_keys
from .points import (
    effective_points,
    points_for_next_level,
    points_for_previous_level,
    points_to_relative_level,
)
from .skill import BaseSkill, Skill, Technique
from .skill_level import SkillLevel
from .technique import DefaultReference, base_skill_level, resolve_technique_level

__all__ = [
    # Import from display.py
    "format_relative_level",
    "format_technique_level",
    # Import from level_resolver.py
    "resolve_level",
    "skill_bonus_keys",
    "spell_bonus_keys",
    # Import from points.py
    "effective_points",
    "points_for_next_level",
    "points_for_previous_level",
    "points_to_relative_level",
    # Import from skill.py
    "BaseSkill",
    "Skill",
    "Technique",
    # Import from skill_level.py
    "SkillLevel",
    # Import from technique.py
    "DefaultReference",
    "base_skill_level",
    "resolve_technique_level",
]
