"""
Bonus aggregation module for the proficiency engine.

The level resolvers only depend on the BonusAggregator protocol. The
FeatureBonusAggregator implements it over the bonuses of a character using
the feature id convention: an exact id, the id followed by "/<qualifier>",
and the id followed by "*" for bonuses matched through criteria.
"""

from collections import defaultdict
from typing import Iterable, Protocol

from catchery import log_warning

from gurps_skills.core.constants import QUALIFIER_SEPARATOR, WILDCARD_SUFFIX
from gurps_skills.core.utils import fold

from .bonus import Bonus, BonusKey, BonusResult


class BonusAggregator(Protocol):

    def bonus_for(
        self,
        feature_id: str,
        qualifier: str | None,
        categories: frozenset[str] = frozenset(),
        specialization: str | None = None,
        include_bare: bool = True,
        wildcard_first: bool = False,
    ) -> BonusResult:
        """Sum the bonuses that apply to a lookup.

        Args:
            feature_id (str): The base feature id, e.g. "spell.college".
            qualifier (str | None): The name being looked up, e.g. "Fire".
            categories (frozenset[str]): Categories of the skill or spell.
            specialization (str | None): Specialization of the skill.
            include_bare (bool): Apply bonuses registered under the bare id.
            wildcard_first (bool): Put the wildcard bonuses first.

        Returns:
            BonusResult: The total amount and its explanation. A lookup that
            finds nothing returns a zero amount and an empty explanation.
        """
        ...


class FeatureBonusAggregator:
    """
    Looks up the bonuses of a character by feature id.

    Attributes:
        features (dict[str, list[Bonus]]):
            The registered bonuses, keyed by their lowercased feature id.

    """

    def __init__(self, bonuses: Iterable[Bonus] = ()) -> None:
        self.features: dict[str, list[Bonus]] = defaultdict(list)
        for bonus in bonuses:
            self.register(bonus)

    def register(self, bonus: Bonus) -> None:
        """
        Adds a bonus to the lookup table.

        Args:
            bonus (Bonus):
                The bonus to register. Bonuses with an unusable feature id
                are skipped with a warning.

        """
        key = fold(bonus.feature_id)
        base = key.rstrip(WILDCARD_SUFFIX).split(QUALIFIER_SEPARATOR, 1)[0]
        if not base:
            log_warning(
                f"Ignoring bonus with unusable feature id: '{bonus.feature_id}'",
                {"feature_id": bonus.feature_id, "source": bonus.source},
            )
            return
        self.features[key].append(bonus)

    def bonus_for(
        self,
        feature_id: str,
        qualifier: str | None,
        categories: frozenset[str] = frozenset(),
        specialization: str | None = None,
        include_bare: bool = True,
        wildcard_first: bool = False,
    ) -> BonusResult:
        """
        Sums the exact, qualified and wildcard bonuses for a lookup.

        Args:
            feature_id (str):
                The base feature id.
            qualifier (str | None):
                The name being looked up, matched case-insensitively.
            categories (frozenset[str]):
                Categories matched by the wildcard bonuses.
            specialization (str | None):
                Specialization matched by the wildcard bonuses.
            include_bare (bool):
                Apply the bonuses registered under the bare id. Skill lookups
                only read the qualified and wildcard ids.
            wildcard_first (bool):
                Put the wildcard fragments before the qualified ones.

        Returns:
            BonusResult:
                The total amount and the explanation fragments, in the order
                exact, qualified, wildcard unless wildcard_first is set.

        """
        base = fold(feature_id)
        exact = self._exact(base) if include_bare else BonusResult()
        qualified = BonusResult()
        if fold(qualifier):
            qualified = self._exact(f"{base}{QUALIFIER_SEPARATOR}{fold(qualifier)}")
        compared = self._compared(
            f"{base}{WILDCARD_SUFFIX}", qualifier, specialization, categories
        )
        if wildcard_first:
            return exact + compared + qualified
        return exact + qualified + compared

    def _exact(self, key: str) -> BonusResult:
        result = BonusResult()
        for bonus in self.features.get(key, []):
            result += BonusResult(amount=bonus.amount, explanation=bonus.explanation)
        return result

    def _compared(
        self,
        key: str,
        qualifier: str | None,
        specialization: str | None,
        categories: frozenset[str],
    ) -> BonusResult:
        result = BonusResult()
        for bonus in self.features.get(key, []):
            if bonus.matches(qualifier, specialization, categories):
                result += BonusResult(amount=bonus.amount, explanation=bonus.explanation)
        return result


def query_bonus(aggregator: BonusAggregator, key: BonusKey) -> BonusResult:
    """
    Resolves a single bonus key against an aggregator.

    Args:
        aggregator (BonusAggregator):
            The aggregator to query.
        key (BonusKey):
            The key to resolve. With several qualifiers the one with the
            highest amount wins, the first one on ties.

    Returns:
        BonusResult:
            The bonus found for the key.

    """
    if len(key.qualifiers) <= 1:
        qualifier = key.qualifiers[0] if key.qualifiers else None
        return aggregator.bonus_for(
            key.feature_id,
            qualifier,
            key.categories,
            key.specialization,
            key.include_bare,
            key.wildcard_first,
        )
    best: BonusResult | None = None
    for qualifier in key.qualifiers:
        found = aggregator.bonus_for(
            key.feature_id,
            qualifier,
            key.categories,
            key.specialization,
            key.include_bare,
            key.wildcard_first,
        )
        if best is None or found.amount > best.amount:
            best = found
    return best if best is not None else BonusResult()


def collect_bonuses(aggregator: BonusAggregator, keys: Iterable[BonusKey]) -> BonusResult:
    """
    Resolves several bonus keys and sums them, keeping the key order.

    Args:
        aggregator (BonusAggregator): The aggregator to query.
        keys (Iterable[BonusKey]): The keys to resolve.

    Returns:
        BonusResult: The sum of the bonuses found for every key.

    """
    total = BonusResult()
    for key in keys:
        total += query_bonus(aggregator, key)
    return total
