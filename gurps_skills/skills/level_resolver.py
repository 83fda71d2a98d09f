"""
Level resolver module for the proficiency engine.

Computes the level of a skill or spell trained directly against an
attribute: the attribute score, plus the relative level bought by the
invested points, plus every bonus the character has for it.
"""

from typing import Iterable, Sequence

from catchery import log_debug

from gurps_skills.context import Context, is_live
from gurps_skills.core.constants import (
    SKILL_NAME_ID,
    SPELL_COLLEGE_ID,
    SPELL_NAME_ID,
    SPELL_POWER_SOURCE_ID,
    Difficulty,
)
from gurps_skills.core.error_handling import require_non_empty_string
from gurps_skills.features.aggregator import collect_bonuses
from gurps_skills.features.bonus import BonusKey

from .points import points_to_relative_level
from .skill_level import SkillLevel


def resolve_level(
    context: Context,
    attribute: str,
    points: int,
    difficulty: Difficulty,
    bonus_keys: Iterable[BonusKey] = (),
) -> SkillLevel:
    """
    Resolves the level of something trained directly against an attribute.

    Args:
        context (Context):
            The character the level is computed for.
        attribute (str):
            The governing attribute, e.g. "IQ".
        points (int):
            The invested points.
        difficulty (Difficulty):
            The difficulty tier.
        bonus_keys (Iterable[BonusKey]):
            The bonus lookups to apply, in tooltip order.

    Returns:
        SkillLevel:
            The resolved level. Without a live character, or with less than
            one effective point, the CANNOT_PERFORM sentinel.

    Raises:
        InvalidInput: If the points, difficulty or attribute are malformed.

    """
    usable, relative_level = points_to_relative_level(points, difficulty)
    require_non_empty_string(attribute, "attribute")
    if not is_live(context):
        return SkillLevel.cannot_perform()
    if not usable:
        log_debug(
            "Not enough points to use the skill",
            {"points": points, "difficulty": str(difficulty)},
        )
        return SkillLevel.cannot_perform()
    base = context.attributes.get_base_level(attribute)
    result = SkillLevel(level=base + relative_level, relative_level=relative_level)
    return result.with_bonus(collect_bonuses(context.bonuses, bonus_keys))


def skill_bonus_keys(
    name: str,
    specialization: str | None,
    categories: Iterable[str] = (),
    wildcard_first: bool = True,
) -> list[BonusKey]:
    """
    Returns the bonus lookups of a skill or technique.

    Only bonuses qualified with the skill name, or matched through wildcard
    criteria, apply. A bare "skill.name" bonus is ignored.

    Args:
        name (str): The skill name.
        specialization (str | None): The skill specialization.
        categories (Iterable[str]): The skill categories.
        wildcard_first (bool): Put the wildcard bonuses first in the tooltip,
            as skills do. Techniques list the named bonuses first.

    Returns:
        list[BonusKey]: The lookups, keyed on the skill name.

    """
    return [
        BonusKey(
            feature_id=SKILL_NAME_ID,
            qualifiers=(name,),
            specialization=specialization,
            categories=frozenset(categories),
            include_bare=False,
            wildcard_first=wildcard_first,
        )
    ]


def spell_bonus_keys(
    name: str,
    colleges: Sequence[str],
    power_source: str,
    categories: Iterable[str] = (),
) -> list[BonusKey]:
    """
    Returns the bonus lookups of a spell.

    Args:
        name (str): The spell name.
        colleges (Sequence[str]): The colleges the spell belongs to; the best
            college bonus among them applies.
        power_source (str): The power source of the spell.
        categories (Iterable[str]): The spell categories.

    Returns:
        list[BonusKey]: The college, power source and name lookups.

    """
    tags = frozenset(categories)
    return [
        BonusKey(feature_id=SPELL_COLLEGE_ID, qualifiers=tuple(colleges), categories=tags),
        BonusKey(feature_id=SPELL_POWER_SOURCE_ID, qualifiers=(power_source,), categories=tags),
        BonusKey(feature_id=SPELL_NAME_ID, qualifiers=(name,), categories=tags),
    ]
