"""
Tests for bonus registration and lookup.
"""

import pytest
from gurps_skills.features.aggregator import (
    FeatureBonusAggregator,
    collect_bonuses,
    query_bonus,
)
from gurps_skills.features.bonus import Bonus, BonusKey, BonusResult
from gurps_skills.features.criteria import StringCompareType, StringCriteria


@pytest.fixture
def aggregator():
    return FeatureBonusAggregator(
        [
            Bonus(feature_id="spell.college", amount=1, source="Magery 1"),
            Bonus(feature_id="spell.college/Fire", amount=2, source="Fire Talent"),
            Bonus(
                feature_id="spell.college*",
                amount=3,
                source="Flame Lord",
                name_criteria=StringCriteria(
                    compare=StringCompareType.STARTS_WITH, qualifier="fi"
                ),
            ),
            Bonus(feature_id="spell.power_source/arcane", amount=1, source="Arcane Focus"),
        ]
    )


def test_exact_qualified_and_wildcard_bonuses_are_summed(aggregator):
    result = aggregator.bonus_for("spell.college", "Fire")
    assert result.amount == 6
    assert result.explanation == (
        "\nMagery 1 [+1]\nFire Talent [+2]\nFlame Lord [+3]"
    )


def test_bare_id_can_be_skipped(aggregator):
    result = aggregator.bonus_for("spell.college", "Fire", include_bare=False)
    assert result.amount == 5
    assert result.explanation == "\nFire Talent [+2]\nFlame Lord [+3]"


def test_wildcard_fragments_can_come_first(aggregator):
    result = aggregator.bonus_for(
        "spell.college", "Fire", include_bare=False, wildcard_first=True
    )
    assert result.explanation == "\nFlame Lord [+3]\nFire Talent [+2]"


def test_query_bonus_passes_key_flags(aggregator):
    key = BonusKey(feature_id="spell.college", qualifiers=("Water",), include_bare=False)
    assert query_bonus(aggregator, key) == BonusResult()


def test_qualifier_matching_is_case_insensitive(aggregator):
    assert aggregator.bonus_for("Spell.College", "FIRE").amount == 6


def test_unrelated_qualifier_only_gets_exact_bonus(aggregator):
    result = aggregator.bonus_for("spell.college", "Water")
    assert result.amount == 1
    assert result.explanation == "\nMagery 1 [+1]"


def test_missing_feature_is_not_an_error(aggregator):
    assert aggregator.bonus_for("skill.name", "Stealth") == BonusResult()


def test_empty_qualifier_skips_qualified_bonuses(aggregator):
    assert aggregator.bonus_for("spell.power_source", "").amount == 0
    assert aggregator.bonus_for("spell.power_source", "Arcane").amount == 1


@pytest.mark.parametrize("feature_id", ["", "*", "/fire", "  "])
def test_unusable_feature_ids_are_skipped(feature_id):
    aggregator = FeatureBonusAggregator([Bonus(feature_id=feature_id, amount=5)])
    assert not aggregator.features


def test_wildcard_bonus_matches_categories():
    aggregator = FeatureBonusAggregator(
        [
            Bonus(
                feature_id="skill.name*",
                amount=1,
                source="Combat Reflexes",
                category_criteria=StringCriteria(
                    compare=StringCompareType.IS, qualifier="combat"
                ),
            )
        ]
    )
    assert aggregator.bonus_for("skill.name", "Karate", frozenset({"Combat"})).amount == 1
    assert aggregator.bonus_for("skill.name", "Cooking", frozenset({"Craft"})).amount == 0
    assert aggregator.bonus_for("skill.name", "Cooking").amount == 0


def test_wildcard_bonus_matches_specialization():
    aggregator = FeatureBonusAggregator(
        [
            Bonus(
                feature_id="skill.name*",
                amount=2,
                name_criteria=StringCriteria(
                    compare=StringCompareType.IS, qualifier="ritual magic"
                ),
                specialization_criteria=StringCriteria(
                    compare=StringCompareType.IS, qualifier="fire"
                ),
            )
        ]
    )
    assert aggregator.bonus_for("skill.name", "Ritual Magic", specialization="Fire").amount == 2
    assert aggregator.bonus_for("skill.name", "Ritual Magic", specialization="Water").amount == 0


def test_register_adds_later_bonuses(aggregator):
    aggregator.register(Bonus(feature_id="spell.college/water", amount=4, source="Sea"))
    assert aggregator.bonus_for("spell.college", "water").amount == 5


def test_query_bonus_with_single_qualifier(aggregator):
    key = BonusKey(feature_id="spell.college", qualifiers=("Fire",))
    assert query_bonus(aggregator, key).amount == 6


def test_query_bonus_without_qualifier(aggregator):
    assert query_bonus(aggregator, BonusKey(feature_id="spell.college")).amount == 1


def test_query_bonus_takes_best_qualifier(aggregator):
    key = BonusKey(feature_id="spell.college", qualifiers=("Water", "Fire"))
    result = query_bonus(aggregator, key)
    assert result.amount == 6
    assert "Fire Talent" in result.explanation


def test_collect_bonuses_keeps_key_order(aggregator):
    result = collect_bonuses(
        aggregator,
        [
            BonusKey(feature_id="spell.power_source", qualifiers=("Arcane",)),
            BonusKey(feature_id="spell.college", qualifiers=("Water",)),
        ],
    )
    assert result.amount == 2
    assert result.explanation == "\nArcane Focus [+1]\nMagery 1 [+1]"


def test_bonus_explanation_shows_sign():
    assert Bonus(feature_id="x", amount=-2, source="Curse").explanation == "\nCurse [-2]"
    assert Bonus(feature_id="x", amount=0, source="Nothing").explanation == "\nNothing [+0]"


def test_bonus_is_wildcard():
    assert Bonus(feature_id="skill.name*", amount=1).is_wildcard
    assert not Bonus(feature_id="skill.name/karate", amount=1).is_wildcard


def test_bonus_results_add():
    total = BonusResult(amount=1, explanation="\na") + BonusResult(amount=2, explanation="\nb")
    assert total == BonusResult(amount=3, explanation="\na\nb")
