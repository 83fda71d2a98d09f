"""
Skill level module for the proficiency engine.

Defines the result of every level calculation.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from gurps_skills.core.constants import CANNOT_PERFORM
from gurps_skills.features.bonus import BonusResult


class SkillLevel(BaseModel):
    """
    The computed level of a skill, technique or spell.

    Attributes:
        level (int):
            The final level, CANNOT_PERFORM when nothing can be computed.
        relative_level (int):
            The level relative to the governing attribute or base skill.
        tooltip (str):
            The explanation of the bonuses that went into the level.
        performable (bool):
            False when the level is the CANNOT_PERFORM sentinel.

    """

    level: int = Field(description="The final level.")
    relative_level: int = Field(description="The level relative to its base.")
    tooltip: str = Field(default="", description="Explanation of the bonuses applied.")
    performable: bool = Field(default=True, description="False for the sentinel result.")

    @classmethod
    def cannot_perform(cls) -> SkillLevel:
        """Returns the sentinel result for something that cannot be performed."""
        return cls(level=CANNOT_PERFORM, relative_level=0, tooltip="", performable=False)

    @property
    def rank(self) -> float:
        """
        Returns the value levels are compared by.

        A result that cannot be performed ranks below every real level, even a
        negative one.

        Returns:
            float: The level, or negative infinity for the sentinel.

        """
        return self.level if self.performable else float("-inf")

    def with_bonus(self, bonus: BonusResult) -> SkillLevel:
        """
        Returns a copy with a bonus added to both levels and its explanation.

        Args:
            bonus (BonusResult): The bonus to add.

        Returns:
            SkillLevel: The adjusted copy.

        """
        return self.model_copy(
            update={
                "level": self.level + bonus.amount,
                "relative_level": self.relative_level + bonus.amount,
                "tooltip": self.tooltip + bonus.explanation,
            }
        )

    def is_same_level_as(self, other: SkillLevel) -> bool:
        """Checks two results for the same levels, ignoring the tooltip."""
        return (
            self.level == other.level
            and self.relative_level == other.relative_level
            and self.performable == other.performable
        )
