"""
Technique module for the proficiency engine.

A technique is not trained against an attribute. It defaults from a base
skill at a penalty, and the points invested in it buy back that penalty
one level per point (Hard techniques waste their first point). A technique
may be capped relative to the level of its base skill.
"""

from typing import Iterable, Optional

from catchery import log_debug
from pydantic import BaseModel, Field

from gurps_skills.context import Context, is_live
from gurps_skills.core.constants import TECHNIQUE_DIFFICULTIES, Difficulty
from gurps_skills.core.error_handling import (
    require_difficulty,
    require_non_empty_string,
    require_non_negative_int,
)
from gurps_skills.features.aggregator import collect_bonuses

from .level_resolver import skill_bonus_keys
from .skill_level import SkillLevel


class DefaultReference(BaseModel):
    """A reference to the skill something defaults from."""

    target_skill_name: str = Field(
        description="Name of the base skill, empty when there is none.",
    )
    specialization_qualifier: str | None = Field(
        default=None,
        description="Required specialization of the base skill, None for any.",
    )
    penalty: int = Field(
        default=0,
        description="Modifier applied to the level of the base skill.",
    )

    @property
    def full_name(self) -> str:
        """Returns the base skill name with its specialization, if any."""
        if self.specialization_qualifier:
            return f"{self.target_skill_name} ({self.specialization_qualifier})"
        return self.target_skill_name


def base_skill_level(
    context: Context,
    default: DefaultReference,
    require_points: bool = False,
    excludes: Optional[Iterable[str]] = None,
) -> Optional[int]:
    """
    Looks up the level of the skill a default refers to.

    Args:
        context (Context):
            The character to look in.
        default (DefaultReference):
            The default to resolve.
        require_points (bool):
            Only consider skills with points invested.
        excludes (Optional[Iterable[str]]):
            Full names of skills to skip, to avoid default loops.

    Returns:
        Optional[int]:
            The best matching level, None if the character has no such skill.

    """
    if not is_live(context) or not default.target_skill_name:
        return None
    return context.skills.best_skill_level(
        default.target_skill_name,
        default.specialization_qualifier,
        require_points=require_points,
        excludes=excludes,
    )


def resolve_technique_level(
    context: Context,
    name: str,
    specialization: str | None,
    categories: Iterable[str],
    default: DefaultReference,
    difficulty: Difficulty,
    points: int,
    limit_modifier: Optional[int] = None,
    require_points: bool = False,
    excludes: Optional[Iterable[str]] = None,
) -> SkillLevel:
    """
    Resolves the level of a technique.

    The penalty of the default is applied to the level but is not counted
    in the relative level; callers that want it there add it themselves.

    Args:
        context (Context):
            The character the level is computed for.
        name (str):
            The technique name, used for skill name bonuses.
        specialization (str | None):
            The technique specialization, used for skill name bonuses.
        categories (Iterable[str]):
            The technique categories, used for skill name bonuses.
        default (DefaultReference):
            The skill the technique defaults from.
        difficulty (Difficulty):
            Either AVERAGE or HARD.
        points (int):
            The invested points.
        limit_modifier (Optional[int]):
            Cap on the level relative to the base skill, None for no cap.
        require_points (bool):
            Only default from skills with points invested.
        excludes (Optional[Iterable[str]]):
            Full names of skills not to default from.

    Returns:
        SkillLevel:
            The resolved level, the CANNOT_PERFORM sentinel when there is no
            live character or no base skill.

    Raises:
        InvalidInput: If the name, points or difficulty are malformed.

    """
    require_non_empty_string(name, "name")
    require_non_negative_int(points, "points")
    require_difficulty(difficulty, allowed=TECHNIQUE_DIFFICULTIES)
    if not is_live(context):
        return SkillLevel.cannot_perform()
    base = base_skill_level(context, default, require_points, excludes)
    if base is None:
        log_debug(
            f"No base skill '{default.full_name}' to default from",
            {"technique": name},
        )
        return SkillLevel.cannot_perform()

    if difficulty == Difficulty.HARD:
        points -= 1
    relative_level = max(points, 0)
    bonus = collect_bonuses(
        context.bonuses,
        skill_bonus_keys(name, specialization, categories, wildcard_first=False),
    )
    relative_level += bonus.amount
    level = base + default.penalty + relative_level

    if limit_modifier is not None:
        maximum = base + limit_modifier
        if level > maximum:
            relative_level -= level - maximum
            level = maximum

    return SkillLevel(
        level=level, relative_level=relative_level, tooltip=bonus.explanation
    )
