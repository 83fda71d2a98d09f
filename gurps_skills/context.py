"""
Calculation context module for the proficiency engine.

Every level calculation receives the character it is performed for as an
explicit context. A LiveContext carries the character's attributes, bonuses
and skills. A TemplateContext stands for library and template entries that
have no concrete character, for which nothing can be computed.
"""

from dataclasses import dataclass

from gurps_skills.interfaces import AttributeSource, BonusAggregator, SkillSource


@dataclass(frozen=True)
class LiveContext:
    """The capabilities of a concrete character."""

    attributes: AttributeSource
    bonuses: BonusAggregator
    skills: SkillSource


@dataclass(frozen=True)
class TemplateContext:
    """An entry that does not belong to a character."""


Context = LiveContext | TemplateContext


def is_live(context: Context) -> bool:
    """
    Tells whether levels can be computed in a context.

    Args:
        context (Context): The context to check.

    Returns:
        bool: True for a live context whose attributes are available.

    """
    return isinstance(context, LiveContext) and context.attributes.is_available()
