"""
String criteria module for the proficiency engine.

Wildcard bonuses decide which skills or spells they apply to by comparing
the name, specialization and categories of the candidate against criteria.
All comparisons are case-insensitive.
"""

from typing import Iterable

from pydantic import BaseModel, Field

from gurps_skills.core.constants import NiceEnum
from gurps_skills.core.utils import fold


class StringCompareType(NiceEnum):
    """Defines how a criteria qualifier is compared against a value."""

    ANY = "any"
    IS = "is"
    IS_NOT = "is_not"
    CONTAINS = "contains"
    DOES_NOT_CONTAIN = "does_not_contain"
    STARTS_WITH = "starts_with"
    DOES_NOT_START_WITH = "does_not_start_with"
    ENDS_WITH = "ends_with"
    DOES_NOT_END_WITH = "does_not_end_with"

    @property
    def is_negated(self) -> bool:
        """Returns True for the comparisons that exclude matching values."""
        return self in (
            StringCompareType.IS_NOT,
            StringCompareType.DOES_NOT_CONTAIN,
            StringCompareType.DOES_NOT_START_WITH,
            StringCompareType.DOES_NOT_END_WITH,
        )


class StringCriteria(BaseModel):
    """
    A single comparison rule against a string value.

    The default criteria matches anything, so a bonus only restricts the
    fields it explicitly sets.
    """

    compare: StringCompareType = Field(
        default=StringCompareType.ANY,
        description="How the qualifier is compared against the value.",
    )
    qualifier: str = Field(
        default="",
        description="The text the value is compared against.",
    )

    def matches(self, value: str | None) -> bool:
        """
        Checks a single value against the criteria.

        Args:
            value (str | None):
                The value to check, None is treated as an empty string.

        Returns:
            bool:
                True if the value satisfies the criteria.

        """
        text = fold(value)
        qualifier = fold(self.qualifier)
        if self.compare == StringCompareType.ANY:
            return True
        if self.compare == StringCompareType.IS:
            return text == qualifier
        if self.compare == StringCompareType.IS_NOT:
            return text != qualifier
        if self.compare == StringCompareType.CONTAINS:
            return qualifier in text
        if self.compare == StringCompareType.DOES_NOT_CONTAIN:
            return qualifier not in text
        if self.compare == StringCompareType.STARTS_WITH:
            return text.startswith(qualifier)
        if self.compare == StringCompareType.DOES_NOT_START_WITH:
            return not text.startswith(qualifier)
        if self.compare == StringCompareType.ENDS_WITH:
            return text.endswith(qualifier)
        if self.compare == StringCompareType.DOES_NOT_END_WITH:
            return not text.endswith(qualifier)
        return False

    def matches_any(self, values: Iterable[str]) -> bool:
        """
        Checks a set of values, such as categories, against the criteria.

        Positive comparisons need one matching value. Negated comparisons
        need every value to pass, so "is not Fire" rejects a spell that has
        Fire among its categories.

        Args:
            values (Iterable[str]):
                The values to check.

        Returns:
            bool:
                True if the set satisfies the criteria.

        """
        items = list(values)
        if not items:
            return self.matches("")
        if self.compare.is_negated:
            return all(self.matches(item) for item in items)
        return any(self.matches(item) for item in items)
