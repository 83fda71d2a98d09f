"""
Bonus module for the proficiency engine.

Defines the situational modifiers registered on a character, the result of
looking them up, and the keys the level resolvers look them up with.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from gurps_skills.core.constants import WILDCARD_SUFFIX
from gurps_skills.core.utils import with_sign

from .criteria import StringCriteria


class Bonus(BaseModel):
    """
    A numeric modifier granted by some trait of the character.

    The feature id selects how the bonus is found:
        - "spell.college" applies to every lookup of that id;
        - "spell.college/fire" applies when the qualifier is "fire";
        - "spell.college*" applies when the criteria match the qualifier,
          the specialization and the categories of the lookup.
    """

    feature_id: str = Field(
        description="The id the bonus is registered under.",
    )
    amount: int = Field(
        description="The signed number of levels granted.",
    )
    source: str = Field(
        default="",
        description="What grants the bonus, shown in explanations.",
    )
    name_criteria: StringCriteria = Field(
        default_factory=StringCriteria,
        description="Criteria on the qualifier, used by wildcard bonuses.",
    )
    specialization_criteria: StringCriteria = Field(
        default_factory=StringCriteria,
        description="Criteria on the specialization, used by wildcard bonuses.",
    )
    category_criteria: StringCriteria = Field(
        default_factory=StringCriteria,
        description="Criteria on the categories, used by wildcard bonuses.",
    )

    @property
    def is_wildcard(self) -> bool:
        """Returns True if the bonus is matched through its criteria."""
        return self.feature_id.strip().endswith(WILDCARD_SUFFIX)

    @property
    def explanation(self) -> str:
        """
        Returns the explanation fragment appended to a tooltip.

        Returns:
            str:
                A line such as "\\nMagery 2 [+2]".

        """
        return f"\n{self.source} [{with_sign(self.amount)}]"

    def matches(
        self,
        qualifier: str | None,
        specialization: str | None,
        categories: frozenset[str],
    ) -> bool:
        """
        Checks the criteria of the bonus against a lookup.

        Args:
            qualifier (str | None): The name the lookup is for.
            specialization (str | None): The specialization of the lookup.
            categories (frozenset[str]): The categories of the lookup.

        Returns:
            bool: True if every criteria matches.

        """
        return (
            self.name_criteria.matches(qualifier)
            and self.specialization_criteria.matches(specialization)
            and self.category_criteria.matches_any(categories)
        )


class BonusResult(BaseModel):
    """The total of the bonuses found by a lookup and their explanation."""

    amount: int = Field(
        default=0,
        description="Sum of the amounts of the matching bonuses.",
    )
    explanation: str = Field(
        default="",
        description="Concatenated explanation fragments, in lookup order.",
    )

    def __add__(self, other: BonusResult) -> BonusResult:
        return BonusResult(
            amount=self.amount + other.amount,
            explanation=self.explanation + other.explanation,
        )


class BonusKey(BaseModel):
    """
    Describes one bonus lookup a resolver performs.

    With more than one qualifier the best scoring qualifier is used, which is
    how a spell belonging to several colleges gets its college bonus.
    """

    feature_id: str = Field(
        description="The base feature id, without qualifier or wildcard.",
    )
    qualifiers: tuple[str, ...] = Field(
        default=(),
        description="The qualifiers to look up, usually a single name.",
    )
    specialization: str | None = Field(
        default=None,
        description="The specialization matched by wildcard bonuses.",
    )
    categories: frozenset[str] = Field(
        default_factory=frozenset,
        description="The categories matched by wildcard bonuses.",
    )
    include_bare: bool = Field(
        default=True,
        description="Whether bonuses registered under the bare id apply.",
    )
    wildcard_first: bool = Field(
        default=False,
        description="Whether wildcard bonuses come first in the explanation.",
    )
