"""
Display module for the proficiency engine.

Formats computed levels the way they appear in the skill and spell lists.
"""

from gurps_skills.core.utils import with_sign

from .skill_level import SkillLevel


def format_relative_level(attribute: str, level: SkillLevel) -> str:
    """
    Formats the relative level of a skill or spell, e.g. "IQ+2".

    Args:
        attribute (str): The name of the governing attribute.
        level (SkillLevel): The computed level.

    Returns:
        str: "-" when the skill cannot be performed, the attribute alone when
        the relative level is zero.

    """
    if not level.performable:
        return "-"
    if level.relative_level == 0:
        return attribute
    return f"{attribute}{with_sign(level.relative_level)}"


def format_technique_level(level: SkillLevel, modifier: int = 0) -> str:
    """
    Formats the level of a technique, e.g. "14/+2".

    Args:
        level (SkillLevel): The computed level.
        modifier (int): Added to the relative level before display.

    Returns:
        str: "-" when the technique cannot be performed or its level is
        negative.

    """
    if not level.performable or level.level < 0:
        return "-"
    return f"{level.level}/{with_sign(level.relative_level + modifier)}"
