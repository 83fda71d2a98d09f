"""
Character sheet module for the proficiency engine.

Holds the attributes, skills and bonuses of a single character, and exposes
them to the level resolvers through a LiveContext.
"""

from typing import Iterable, Optional, Union

from gurps_skills.context import LiveContext
from gurps_skills.core.error_handling import InvalidInput, require_non_empty_string
from gurps_skills.core.logging import log_debug, log_error
from gurps_skills.core.utils import fold
from gurps_skills.features.aggregator import FeatureBonusAggregator
from gurps_skills.features.bonus import Bonus
from gurps_skills.skills.skill import Skill, Technique

SheetSkill = Union[Skill, Technique]


class CharacterSheet:
    """
    An in-memory character the level resolvers can query.

    Attributes:
        name (str):
            The name of the character.
        attributes (dict[str, int]):
            The attribute scores, keyed by attribute id (e.g. "IQ").
        skills (list[SheetSkill]):
            The skills and techniques the character knows.
        bonuses (FeatureBonusAggregator):
            The bonuses granted by the character's traits and equipment.

    """

    def __init__(
        self,
        name: str,
        attributes: dict[str, int],
        skills: Iterable[SheetSkill] = (),
        bonuses: Iterable[Bonus] = (),
    ) -> None:
        self.name: str = name
        self.attributes: dict[str, int] = {
            key.upper(): value for key, value in attributes.items()
        }
        self.skills: list[SheetSkill] = list(skills)
        self.bonuses: FeatureBonusAggregator = FeatureBonusAggregator(bonuses)

    # ============================================================================
    # MUTATION
    # ============================================================================

    def add_skill(self, skill: SheetSkill) -> None:
        """
        Adds a skill or technique to the sheet.

        Args:
            skill (SheetSkill): The skill to add.

        """
        self.skills.append(skill)

    def add_bonus(self, bonus: Bonus) -> None:
        """
        Adds a bonus to the sheet.

        Args:
            bonus (Bonus): The bonus to add.

        """
        self.bonuses.register(bonus)

    # ============================================================================
    # ATTRIBUTE SOURCE
    # ============================================================================

    def get_base_level(self, attribute_id: str) -> int:
        """
        Returns the score of an attribute.

        Args:
            attribute_id (str): The attribute, e.g. "IQ", in any case.

        Returns:
            int: The attribute score.

        Raises:
            InvalidInput: If the character has no such attribute.

        """
        require_non_empty_string(attribute_id, "attribute_id")
        key = attribute_id.upper()
        if key not in self.attributes:
            log_error(
                f"Unknown attribute: '{attribute_id}'",
                {"character": self.name, "known": sorted(self.attributes)},
            )
            raise InvalidInput(f"Unknown attribute: {attribute_id!r}")
        return self.attributes[key]

    def is_available(self) -> bool:
        return True

    # ============================================================================
    # SKILL SOURCE
    # ============================================================================

    def best_skill_level(
        self,
        name: str,
        specialization: Optional[str],
        require_points: bool = False,
        excludes: Optional[Iterable[str]] = None,
    ) -> Optional[int]:
        """
        Finds the best level among the skills with a given name.

        Args:
            name (str):
                The skill name, compared case-insensitively.
            specialization (Optional[str]):
                Required specialization, None or empty to accept any.
            require_points (bool):
                Skip skills with no points invested. Techniques are never
                skipped, since they are usable without points.
            excludes (Optional[Iterable[str]]):
                Full names of skills to skip. Every skill evaluated here is
                excluded from its own defaults, which stops default loops.

        Returns:
            Optional[int]:
                The best level, or None if no matching skill can be performed.

        """
        excluded = frozenset(excludes or ())
        best: Optional[int] = None
        for skill in self.find_skills(name, specialization):
            if skill.full_name in excluded:
                continue
            if require_points and isinstance(skill, Skill) and skill.points == 0:
                continue
            level = skill.calculate_level(
                self.context(), excludes=excluded | {skill.full_name}
            )
            if not level.performable:
                continue
            if best is None or level.level > best:
                best = level.level
        if best is None:
            log_debug(
                f"No usable skill named '{name}'",
                {"character": self.name, "specialization": specialization},
            )
        return best

    def find_skills(self, name: str, specialization: Optional[str] = None) -> list[SheetSkill]:
        """
        Returns the skills with a given name and, optionally, specialization.

        Args:
            name (str): The skill name, compared case-insensitively.
            specialization (Optional[str]): Required specialization, compared
                case-insensitively; None or empty to accept any.

        Returns:
            list[SheetSkill]: The matching skills, in sheet order.

        """
        return [
            skill
            for skill in self.skills
            if fold(skill.name) == fold(name)
            and (not fold(specialization) or fold(skill.specialization) == fold(specialization))
        ]

    # ============================================================================
    # CONTEXT
    # ============================================================================

    def context(self) -> LiveContext:
        """
        Returns the context levels of this character are computed in.

        Returns:
            LiveContext: The context backed by this sheet.

        """
        return LiveContext(attributes=self, bonuses=self.bonuses, skills=self)

    def __str__(self) -> str:
        return self.name
