"""
Tests for the Ritual Magic defaulting algorithm.
"""

import pytest
from gurps_skills.context import LiveContext, TemplateContext
from gurps_skills.core.constants import CANNOT_PERFORM, Difficulty
from gurps_skills.core.error_handling import InvalidInput
from gurps_skills.features.aggregator import FeatureBonusAggregator
from gurps_skills.features.bonus import Bonus
from gurps_skills.spells.ritual_magic import (
    DefaultStrategy,
    build_default,
    evaluate_strategy,
    pick_strategy,
    resolve_ritual_magic_level,
)
from gurps_skills.skills.skill_level import SkillLevel


def fake_skills(mocker, by_specialization, generic):
    """Builds a skill source answering per specialization, or any for None."""

    def lookup(name, specialization, require_points=False, excludes=None):
        if specialization is None:
            return generic
        return by_specialization.get(specialization)

    skills = mocker.Mock()
    skills.best_skill_level.side_effect = lookup
    return skills


def live_context(mocker, by_specialization, generic, bonuses=()):
    attributes = mocker.Mock()
    attributes.is_available.return_value = True
    return LiveContext(
        attributes=attributes,
        bonuses=FeatureBonusAggregator(bonuses),
        skills=fake_skills(mocker, by_specialization, generic),
    )


def resolve(context, colleges=("Fire",), prerequisite_count=2, points=4, difficulty=Difficulty.HARD):
    return resolve_ritual_magic_level(
        context,
        "Ignite Fire",
        "Ritual Magic",
        list(colleges),
        (),
        difficulty,
        prerequisite_count,
        points,
    )


def test_build_default_specialized():
    default = build_default(DefaultStrategy.SPECIALIZED, "Ritual Magic", "Fire", 2)
    assert default.target_skill_name == "Ritual Magic"
    assert default.specialization_qualifier == "Fire"
    assert default.penalty == -2


def test_build_default_generic():
    default = build_default(DefaultStrategy.GENERIC, "Ritual Magic", "Fire", 2)
    assert default.target_skill_name == "Ritual Magic"
    assert default.specialization_qualifier is None
    assert default.penalty == -8


def test_build_default_without_college_has_no_target():
    for strategy in DefaultStrategy:
        assert build_default(strategy, "Ritual Magic", "", 2).target_skill_name == ""


def test_generic_default_wins_when_higher(mocker):
    # Specialized: 10 - 2 + 3 = 11, capped at 10.
    # Generic: 16 - 8 + 3 = 11, under the cap of 16.
    context = live_context(mocker, {"Fire": 10}, 16)
    level = resolve(context)
    assert level.level == 11
    assert level.relative_level == -5


def test_specialized_default_wins_when_higher(mocker):
    # Specialized: 14 - 2 + 3 = 15, capped at 14.
    # Generic: 14 - 8 + 3 = 9.
    context = live_context(mocker, {"Fire": 14}, 14)
    level = resolve(context)
    assert level.level == 14
    assert level.relative_level == 0


def test_both_defaults_are_evaluated(mocker):
    context = live_context(mocker, {"Fire": 14}, 14)
    resolve(context)
    looked_up = [call.args[1] for call in context.skills.best_skill_level.call_args_list]
    assert looked_up == ["Fire", None]


def test_tie_keeps_specialized_default(mocker):
    # Both reach 10: the specialized relative level shows no fallback penalty.
    context = live_context(mocker, {"Fire": 10}, 16)
    level = resolve(context, prerequisite_count=0, points=0)
    assert level.level == 10
    assert level.relative_level == 0


def test_pick_strategy_prefers_specialized_on_tie():
    specialized = SkillLevel(level=10, relative_level=0)
    generic = SkillLevel(level=10, relative_level=-6)
    assert pick_strategy(specialized, generic) == (DefaultStrategy.SPECIALIZED, specialized)


def test_pick_strategy_ranks_real_levels_above_sentinel():
    generic = SkillLevel(level=-3, relative_level=-9)
    strategy, level = pick_strategy(SkillLevel.cannot_perform(), generic)
    assert strategy == DefaultStrategy.GENERIC
    assert level == generic


def test_missing_specialization_falls_back_to_generic(mocker):
    context = live_context(mocker, {}, 15)
    level = resolve(context)
    # 15 - 8 + 3
    assert level.level == 10
    assert level.relative_level == -5


def test_no_base_skill_cannot_perform(mocker):
    context = live_context(mocker, {}, None)
    level = resolve(context)
    assert level.level == CANNOT_PERFORM
    assert level.relative_level == 0
    assert not level.performable


def test_best_college_wins(mocker):
    context = live_context(mocker, {"Fire": 10, "Water": 14}, 14)
    level = resolve(context, colleges=("Fire", "Water"), prerequisite_count=0, points=0)
    assert level.level == 14


@pytest.mark.parametrize(
    "specialized, generic, prerequisite_count, points",
    [
        (10, 16, 2, 4),
        (14, 14, 2, 4),
        (12, None, 0, 0),
        (None, 18, 3, 1),
        (-2, 5, 1, 2),
    ],
)
def test_result_never_below_generic_default(mocker, specialized, generic, prerequisite_count, points):
    by_specialization = {} if specialized is None else {"Fire": specialized}
    context = live_context(mocker, by_specialization, generic)
    result = resolve(context, prerequisite_count=prerequisite_count, points=points)
    fallback = evaluate_strategy(
        context,
        DefaultStrategy.GENERIC,
        "Ignite Fire",
        "Ritual Magic",
        "Fire",
        (),
        Difficulty.HARD,
        prerequisite_count,
        points,
    )
    assert result.rank >= fallback.rank


def test_empty_college_list_matches_single_empty_college(mocker):
    context = live_context(mocker, {"Fire": 14}, 14)
    empty = resolve(context, colleges=())
    blank = resolve(context, colleges=("",))
    assert empty.is_same_level_as(blank)
    assert empty.tooltip == blank.tooltip
    assert not empty.performable
    context.skills.best_skill_level.assert_not_called()


def test_template_context_evaluates_nothing():
    level = resolve(TemplateContext())
    assert level == SkillLevel.cannot_perform()


def test_spell_bonuses_are_added_after_the_cap(mocker):
    context = live_context(
        mocker,
        {"Fire": 14},
        14,
        bonuses=[
            Bonus(feature_id="spell.college/fire", amount=1, source="Fire Talent"),
            Bonus(feature_id="spell.name/ignite fire", amount=2, source="Grimoire"),
        ],
    )
    level = resolve(context)
    assert level.level == 17
    assert level.relative_level == 3
    assert level.tooltip == "\nFire Talent [+1]\nGrimoire [+2]"


def test_bonuses_do_not_apply_when_unperformable(mocker):
    context = live_context(
        mocker,
        {},
        None,
        bonuses=[Bonus(feature_id="spell.name", amount=5, source="Luck")],
    )
    assert resolve(context) == SkillLevel.cannot_perform()


def test_negative_prerequisite_count_is_rejected(mocker):
    with pytest.raises(InvalidInput):
        resolve(live_context(mocker, {}, 10), prerequisite_count=-1)


def test_very_hard_is_rejected(mocker):
    with pytest.raises(InvalidInput):
        resolve(live_context(mocker, {"Fire": 12}, 12), difficulty=Difficulty.VERY_HARD)


def test_first_college_is_kept_when_best(mocker):
    context = live_context(mocker, {"Fire": 14, "Water": 10}, 10)
    level = resolve(context, colleges=("Fire", "Water"), prerequisite_count=0, points=0)
    assert level.level == 14
    assert level.relative_level == 0
