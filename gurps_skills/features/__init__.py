"""
Bonus features for the proficiency engine.

Exposes the bonus models, the criteria used by wildcard bonuses and the
aggregator that resolves bonus lookups.
"""

from .aggregator import (
    BonusAggregator,
    FeatureBonusAggregator,
    collect_bonuses,
    query_bonus,
)
from .bonus import Bonus, BonusKey, BonusResult
from .criteria import StringCompareType, StringCriteria

__all__ = [
    "Bonus",
    "BonusAggregator",
    "BonusKey",
    "BonusResult",
    "FeatureBonusAggregator",
    "StringCompareType",
    "StringCriteria",
    "collect_bonuses",
    "query_bonus",
]
