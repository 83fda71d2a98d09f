"""
Constants and enumerations for the proficiency engine.

Defines the difficulty tiers, the feature identifiers used to register and
look up bonuses, and the fixed numbers used by the level calculations.
"""

from enum import Enum

# Level reported when a skill or spell cannot be performed at all.
CANNOT_PERFORM = -1

# Extra penalty applied when a Ritual Magic spell falls back to the
# unspecialized base skill instead of the one for its college.
GENERIC_DEFAULT_PENALTY = 6

# Name of the skill Ritual Magic spells default from.
DEFAULT_RITUAL_BASE_SKILL = "Ritual Magic"

# A Ritual Magic spell can never exceed the level of its base skill.
RITUAL_MAGIC_LIMIT_MODIFIER = 0

# How far the point stepping helpers search for the next/previous level.
POINT_STEP_WINDOW = 4
WILDCARD_POINT_STEP_WINDOW = 12

# Wildcard skills cost three times as much per step on the curve.
WILDCARD_POINT_DIVISOR = 3

# Feature identifiers used by bonuses.
SKILL_NAME_ID = "skill.name"
SPELL_NAME_ID = "spell.name"
SPELL_COLLEGE_ID = "spell.college"
SPELL_POWER_SOURCE_ID = "spell.power_source"

# Separators of the feature id convention: "<id>", "<id>/<qualifier>", "<id>*".
QUALIFIER_SEPARATOR = "/"
WILDCARD_SUFFIX = "*"


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.replace("_", " ").lower().capitalize()


class Difficulty(NiceEnum):
    """Defines the difficulty tiers of skills and spells."""

    EASY = "E"
    AVERAGE = "A"
    HARD = "H"
    VERY_HARD = "VH"
    WILDCARD = "W"

    @property
    def base_relative_level(self) -> int:
        """
        Returns the relative level bought by a single point.

        Returns:
            int: The base relative level offset of this tier.

        """
        return {
            Difficulty.EASY: 0,
            Difficulty.AVERAGE: -1,
            Difficulty.HARD: -2,
            Difficulty.VERY_HARD: -3,
            Difficulty.WILDCARD: -3,
        }[self]


# Difficulties a technique may have.
TECHNIQUE_DIFFICULTIES = (Difficulty.AVERAGE, Difficulty.HARD)
