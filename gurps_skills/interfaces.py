from typing import Iterable, Optional, Protocol

from gurps_skills.features.aggregator import BonusAggregator


class AttributeSource(Protocol):

    def get_base_level(self, attribute_id: str) -> int:
        """Return the current score of an attribute.

        Args:
            attribute_id (str): The attribute, e.g. "IQ" or "DX".

        Returns:
            int: The attribute score skills and spells are based on.
        """
        ...

    def is_available(self) -> bool:
        """Tell whether the attributes belong to an actual character.

        Returns:
            bool: False for library or template entries.
        """
        ...


class SkillSource(Protocol):

    def best_skill_level(
        self,
        name: str,
        specialization: Optional[str],
        require_points: bool = False,
        excludes: Optional[Iterable[str]] = None,
    ) -> Optional[int]:
        """Find the best level among the skills with a given name.

        Args:
            name (str): The skill name, compared case-insensitively.
            specialization (Optional[str]): Required specialization, None or
                empty to accept any specialization.
            require_points (bool): Skip skills with no points invested.
            excludes (Optional[Iterable[str]]): Full names of skills to skip.

        Returns:
            Optional[int]: The best level, or None if no usable skill exists.
        """
        ...


__all__ = ["AttributeSource", "BonusAggregator", "SkillSource"]
