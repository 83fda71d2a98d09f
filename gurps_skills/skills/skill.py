"""
Skill models for the proficiency engine.

Defines the skills and techniques a character sheet holds. Each computes its
own level for a given context; nothing is cached, so the level always
reflects the current state of the character.
"""

from typing import Iterable, Optional

from pydantic import BaseModel, Field

from gurps_skills.context import Context
from gurps_skills.core.constants import Difficulty

from .level_resolver import resolve_level, skill_bonus_keys
from .skill_level import SkillLevel
from .technique import DefaultReference, base_skill_level, resolve_technique_level


class BaseSkill(BaseModel):
    """Fields shared by skills and techniques."""

    name: str = Field(description="The name of the skill.")
    difficulty: Difficulty = Field(description="The difficulty tier.")
    points: int = Field(default=0, ge=0, description="The invested points.")
    categories: frozenset[str] = Field(
        default_factory=frozenset,
        description="Categories used to match wildcard bonuses.",
    )

    @property
    def full_name(self) -> str:
        """Returns the name with the specialization, if any."""
        if self.specialization:
            return f"{self.name} ({self.specialization})"
        return self.name

    def calculate_level(
        self, context: Context, excludes: Optional[Iterable[str]] = None
    ) -> SkillLevel:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.full_name


class Skill(BaseSkill):
    """A skill trained directly against an attribute."""

    specialization: str = Field(
        default="",
        description="The specialization of the skill, e.g. a spell college.",
    )
    attribute: str = Field(default="DX", description="The governing attribute.")

    def calculate_level(
        self, context: Context, excludes: Optional[Iterable[str]] = None
    ) -> SkillLevel:
        """
        Computes the level of the skill.

        Args:
            context (Context): The character the skill belongs to.
            excludes (Optional[Iterable[str]]): Unused, skills do not default.

        Returns:
            SkillLevel: The level of the skill.

        """
        return resolve_level(
            context,
            self.attribute,
            self.points,
            self.difficulty,
            skill_bonus_keys(self.name, self.specialization, self.categories),
        )


class Technique(BaseSkill):
    """A technique, defaulting from a base skill."""

    default: DefaultReference = Field(description="The skill the technique defaults from.")
    limit_modifier: Optional[int] = Field(
        default=None,
        description="Cap on the level relative to the base skill, None for no cap.",
    )

    @property
    def specialization(self) -> str:
        return self.default.full_name

    def calculate_level(
        self, context: Context, excludes: Optional[Iterable[str]] = None
    ) -> SkillLevel:
        """
        Computes the level of the technique.

        Args:
            context (Context): The character the technique belongs to.
            excludes (Optional[Iterable[str]]): Full names of skills that
                must not be used as the base skill.

        Returns:
            SkillLevel: The level of the technique.

        """
        return resolve_technique_level(
            context,
            self.name,
            self.specialization,
            self.categories,
            self.default,
            self.difficulty,
            self.points,
            limit_modifier=self.limit_modifier,
            require_points=True,
            excludes=excludes,
        )

    def satisfied(self, context: Context) -> tuple[bool, str]:
        """
        Checks that the base skill of the technique is known.

        Args:
            context (Context): The character the technique belongs to.

        Returns:
            tuple[bool, str]:
                Whether the default is satisfied, and why not otherwise.

        """
        if base_skill_level(context, self.default, require_points=True) is not None:
            return True, ""
        return False, f"Requires a skill named {self.default.full_name}"
