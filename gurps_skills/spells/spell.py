"""
Spell models for the proficiency engine.

Regular spells are trained against an attribute like skills. Ritual Magic
spells default from a base skill instead.
"""

from typing import Iterable, Optional

from pydantic import BaseModel, Field

from gurps_skills.context import Context
from gurps_skills.core.constants import DEFAULT_RITUAL_BASE_SKILL, Difficulty
from gurps_skills.skills.level_resolver import resolve_level, spell_bonus_keys
from gurps_skills.skills.skill_level import SkillLevel

from .ritual_magic import resolve_ritual_magic_level, ritual_magic_satisfied


class Spell(BaseModel):
    """A spell trained directly against an attribute."""

    name: str = Field(description="The name of the spell.")
    colleges: tuple[str, ...] = Field(
        default=(),
        description="The colleges the spell belongs to.",
    )
    power_source: str = Field(default="", description="The power source of the spell.")
    attribute: str = Field(default="IQ", description="The governing attribute.")
    difficulty: Difficulty = Field(default=Difficulty.HARD, description="The difficulty tier.")
    points: int = Field(default=1, ge=0, description="The invested points.")
    categories: frozenset[str] = Field(
        default_factory=frozenset,
        description="Categories used to match wildcard bonuses.",
    )

    def calculate_level(
        self, context: Context, excludes: Optional[Iterable[str]] = None
    ) -> SkillLevel:
        """
        Computes the level of the spell.

        Args:
            context (Context): The character the spell belongs to.
            excludes (Optional[Iterable[str]]): Unused, spells do not default.

        Returns:
            SkillLevel: The level of the spell.

        """
        return resolve_level(
            context,
            self.attribute,
            self.points,
            self.difficulty,
            spell_bonus_keys(self.name, self.colleges, self.power_source, self.categories),
        )


class RitualMagicSpell(Spell):
    """A spell of the Ritual Magic system, defaulting from a base skill."""

    base_skill_name: str = Field(
        default=DEFAULT_RITUAL_BASE_SKILL,
        description="The skill the spell defaults from.",
    )
    prerequisite_count: int = Field(
        default=0,
        ge=0,
        description="The number of prerequisite spells, used as a penalty.",
    )
    points: int = Field(default=0, ge=0, description="The invested points.")

    def calculate_level(
        self, context: Context, excludes: Optional[Iterable[str]] = None
    ) -> SkillLevel:
        """
        Computes the level of the spell from its base skill.

        Args:
            context (Context): The character the spell belongs to.
            excludes (Optional[Iterable[str]]): Unused.

        Returns:
            SkillLevel: The level of the spell.

        """
        return resolve_ritual_magic_level(
            context,
            self.name,
            self.base_skill_name,
            self.colleges,
            self.categories,
            self.difficulty,
            self.prerequisite_count,
            self.points,
            power_source=self.power_source,
        )

    def satisfied(self, context: Context) -> tuple[bool, str]:
        """
        Checks that the spell has a college and a base skill to default from.

        Returns:
            tuple[bool, str]: Whether the spell is usable, and why not otherwise.

        """
        return ritual_magic_satisfied(context, self.base_skill_name, self.colleges)
