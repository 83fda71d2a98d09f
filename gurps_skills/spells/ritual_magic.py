"""
Ritual Magic module for the proficiency engine.

Ritual Magic spells are techniques: they default from a base skill, by
convention "Ritual Magic" specialized in the college of the spell, at a
penalty equal to the number of prerequisite spells. A spell whose college
specialization is missing may fall back to the base skill in any
specialization, at a further -6.

For each college both defaults are evaluated and the better one is kept,
the specialized one on ties. Among several colleges the best one wins, the
first one on ties. Spell bonuses are then added on top.
"""

from typing import Iterable, Sequence

from catchery import log_debug

from gurps_skills.context import Context, is_live
from gurps_skills.core.constants import (
    GENERIC_DEFAULT_PENALTY,
    RITUAL_MAGIC_LIMIT_MODIFIER,
    TECHNIQUE_DIFFICULTIES,
    Difficulty,
    NiceEnum,
)
from gurps_skills.core.error_handling import (
    require_difficulty,
    require_non_empty_string,
    require_non_negative_int,
)
from gurps_skills.features.aggregator import collect_bonuses
from gurps_skills.skills.level_resolver import spell_bonus_keys
from gurps_skills.skills.skill_level import SkillLevel
from gurps_skills.skills.technique import (
    DefaultReference,
    base_skill_level,
    resolve_technique_level,
)


class DefaultStrategy(NiceEnum):
    """Defines how a Ritual Magic spell defaults from its base skill."""

    SPECIALIZED = "SPECIALIZED"
    GENERIC = "GENERIC"


def build_default(
    strategy: DefaultStrategy,
    base_skill_name: str,
    specialization: str,
    prerequisite_count: int,
) -> DefaultReference:
    """
    Builds the default a strategy uses.

    Args:
        strategy (DefaultStrategy):
            The strategy to build the default for.
        base_skill_name (str):
            The skill the spell defaults from.
        specialization (str):
            The college of the spell. When empty, there is no base skill to
            default from.
        prerequisite_count (int):
            The number of prerequisite spells.

    Returns:
        DefaultReference:
            The specialized default at -prerequisites, or the generic one at
            -(6 + prerequisites).

    """
    target = base_skill_name if specialization else ""
    if strategy == DefaultStrategy.SPECIALIZED:
        return DefaultReference(
            target_skill_name=target,
            specialization_qualifier=specialization or None,
            penalty=-prerequisite_count,
        )
    return DefaultReference(
        target_skill_name=target,
        specialization_qualifier=None,
        penalty=-(GENERIC_DEFAULT_PENALTY + prerequisite_count),
    )


def evaluate_strategy(
    context: Context,
    strategy: DefaultStrategy,
    name: str,
    base_skill_name: str,
    specialization: str,
    categories: Iterable[str],
    difficulty: Difficulty,
    prerequisite_count: int,
    points: int,
) -> SkillLevel:
    """
    Computes the level a Ritual Magic spell gets from one strategy.

    The level is capped at the level of the base skill, and the penalty of
    the default is counted in the relative level.

    Returns:
        SkillLevel: The level of the candidate.

    """
    default = build_default(strategy, base_skill_name, specialization, prerequisite_count)
    level = resolve_technique_level(
        context,
        name,
        specialization,
        categories,
        default,
        difficulty,
        points,
        limit_modifier=RITUAL_MAGIC_LIMIT_MODIFIER,
    )
    if not level.performable:
        return level
    return level.model_copy(update={"relative_level": level.relative_level + default.penalty})


def pick_strategy(
    specialized: SkillLevel, generic: SkillLevel
) -> tuple[DefaultStrategy, SkillLevel]:
    """
    Keeps the better of the two candidates.

    Args:
        specialized (SkillLevel): The candidate of the specialized default.
        generic (SkillLevel): The candidate of the generic default.

    Returns:
        tuple[DefaultStrategy, SkillLevel]:
            The winning strategy and its level; the specialized one on ties.

    """
    if specialized.rank >= generic.rank:
        return DefaultStrategy.SPECIALIZED, specialized
    return DefaultStrategy.GENERIC, generic


def resolve_for_specialization(
    context: Context,
    name: str,
    base_skill_name: str,
    specialization: str,
    categories: Iterable[str],
    difficulty: Difficulty,
    prerequisite_count: int,
    points: int,
) -> SkillLevel:
    """
    Evaluates both strategies for one college and keeps the better one.

    Returns:
        SkillLevel: The level of the winning candidate.

    """
    tags = frozenset(categories)
    candidates = {
        strategy: evaluate_strategy(
            context,
            strategy,
            name,
            base_skill_name,
            specialization,
            tags,
            difficulty,
            prerequisite_count,
            points,
        )
        for strategy in DefaultStrategy
    }
    strategy, level = pick_strategy(
        candidates[DefaultStrategy.SPECIALIZED], candidates[DefaultStrategy.GENERIC]
    )
    log_debug(
        f"Ritual Magic spell '{name}' defaults with the {strategy.display_name.lower()} strategy",
        {
            "college": specialization,
            "specialized": candidates[DefaultStrategy.SPECIALIZED].level,
            "generic": candidates[DefaultStrategy.GENERIC].level,
        },
    )
    return level


def resolve_ritual_magic_level(
    context: Context,
    name: str,
    base_skill_name: str,
    specializations: Sequence[str],
    categories: Iterable[str],
    difficulty: Difficulty,
    prerequisite_count: int,
    points: int,
    power_source: str = "",
) -> SkillLevel:
    """
    Resolves the level of a Ritual Magic spell.

    Args:
        context (Context):
            The character the level is computed for.
        name (str):
            The spell name.
        base_skill_name (str):
            The skill the spell defaults from, usually "Ritual Magic".
        specializations (Sequence[str]):
            The colleges of the spell. An empty list is evaluated as a single
            empty college.
        categories (Iterable[str]):
            The spell categories, used for bonuses.
        difficulty (Difficulty):
            Either AVERAGE or HARD.
        prerequisite_count (int):
            The number of prerequisite spells, used as the default penalty.
        points (int):
            The invested points.
        power_source (str):
            The power source of the spell, used for bonuses.

    Returns:
        SkillLevel:
            The resolved level, the CANNOT_PERFORM sentinel without a live
            character or when no default resolves.

    Raises:
        InvalidInput: If any input is malformed.

    """
    require_non_empty_string(name, "name")
    require_non_empty_string(base_skill_name, "base_skill_name")
    require_non_negative_int(prerequisite_count, "prerequisite_count")
    require_non_negative_int(points, "points")
    require_difficulty(difficulty, allowed=TECHNIQUE_DIFFICULTIES)
    if not is_live(context):
        return SkillLevel.cannot_perform()

    tags = frozenset(categories)
    candidates = [
        resolve_for_specialization(
            context,
            name,
            base_skill_name,
            specialization,
            tags,
            difficulty,
            prerequisite_count,
            points,
        )
        for specialization in list(specializations) or [""]
    ]
    best = candidates[0]
    for candidate in candidates[1:]:
        if candidate.rank > best.rank:
            best = candidate

    if not best.performable:
        return best
    bonus = collect_bonuses(
        context.bonuses, spell_bonus_keys(name, specializations, power_source, tags)
    )
    return best.with_bonus(bonus)


def ritual_magic_satisfied(
    context: Context, base_skill_name: str, colleges: Sequence[str]
) -> tuple[bool, str]:
    """
    Checks that a Ritual Magic spell has something to default from.

    Args:
        context (Context): The character the spell belongs to.
        base_skill_name (str): The skill the spell defaults from.
        colleges (Sequence[str]): The colleges of the spell.

    Returns:
        tuple[bool, str]:
            Whether the spell is usable, and why not otherwise.

    """
    if not colleges:
        return False, "Must be assigned to a college"
    for college in colleges:
        default = DefaultReference(
            target_skill_name=base_skill_name, specialization_qualifier=college
        )
        if base_skill_level(context, default) is not None:
            return True, ""
    if base_skill_level(context, DefaultReference(target_skill_name=base_skill_name)) is not None:
        return True, ""
    return False, "Requires a skill named " + " or ".join(
        f"{base_skill_name} ({college})" for college in colleges
    )
