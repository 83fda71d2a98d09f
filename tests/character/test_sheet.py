"""
Tests for the character sheet.
"""

import pytest
from gurps_skills.character.sheet import CharacterSheet
from gurps_skills.context import LiveContext, is_live
from gurps_skills.core.constants import Difficulty
from gurps_skills.core.error_handling import InvalidInput
from gurps_skills.features.bonus import Bonus
from gurps_skills.skills.skill import Skill, Technique
from gurps_skills.skills.technique import DefaultReference


@pytest.fixture
def sheet():
    return CharacterSheet(
        name="Ayla",
        attributes={"iq": 13, "DX": 11},
        skills=[
            # IQ 13, Very Hard, 8 points: 13.
            Skill(
                name="Ritual Magic",
                specialization="Fire",
                difficulty=Difficulty.VERY_HARD,
                attribute="IQ",
                points=8,
            ),
            # IQ 13, Very Hard, 24 points: 17.
            Skill(
                name="Ritual Magic",
                specialization="Air",
                difficulty=Difficulty.VERY_HARD,
                attribute="IQ",
                points=24,
            ),
            Skill(name="Stealth", difficulty=Difficulty.AVERAGE, attribute="DX"),
        ],
    )


def test_attributes_are_case_insensitive(sheet):
    assert sheet.get_base_level("IQ") == 13
    assert sheet.get_base_level("dx") == 11


def test_unknown_attribute_is_rejected(sheet):
    with pytest.raises(InvalidInput):
        sheet.get_base_level("HT")


def test_sheet_is_available(sheet):
    assert sheet.is_available()


def test_context_is_live(sheet):
    context = sheet.context()
    assert isinstance(context, LiveContext)
    assert is_live(context)
    assert context.bonuses is sheet.bonuses


def test_best_skill_level_across_specializations(sheet):
    assert sheet.best_skill_level("ritual magic", None) == 17
    assert sheet.best_skill_level("Ritual Magic", "") == 17


def test_best_skill_level_with_specialization(sheet):
    assert sheet.best_skill_level("Ritual Magic", "fire") == 13
    assert sheet.best_skill_level("Ritual Magic", "Water") is None


def test_best_skill_level_skips_unusable_skills(sheet):
    assert sheet.best_skill_level("Stealth", None) is None


def test_best_skill_level_excludes(sheet):
    assert sheet.best_skill_level("Ritual Magic", None, excludes={"Ritual Magic (Air)"}) == 13


def test_best_skill_level_requires_points(sheet):
    sheet.add_skill(
        Skill(name="Cooking", difficulty=Difficulty.EASY, attribute="IQ", points=0)
    )
    assert sheet.best_skill_level("Cooking", None, require_points=True) is None


def test_techniques_do_not_need_points(sheet):
    sheet.add_skill(Skill(name="Karate", difficulty=Difficulty.HARD, attribute="DX", points=4))
    sheet.add_skill(
        Technique(
            name="Kicking",
            difficulty=Difficulty.HARD,
            default=DefaultReference(target_skill_name="Karate", penalty=-2),
        )
    )
    assert sheet.best_skill_level("Kicking", None, require_points=True) == 9


def test_best_skill_level_includes_bonuses(sheet):
    sheet.add_bonus(Bonus(feature_id="skill.name/ritual magic", amount=1, source="Focus"))
    assert sheet.best_skill_level("Ritual Magic", "Fire") == 14


def test_bare_skill_name_bonus_does_not_raise_a_skill():
    cook = CharacterSheet(
        name="Cook",
        attributes={"IQ": 12},
        skills=[Skill(name="Cooking", difficulty=Difficulty.EASY, attribute="IQ", points=1)],
        bonuses=[Bonus(feature_id="skill.name", amount=3)],
    )
    level = cook.skills[0].calculate_level(cook.context())
    assert (level.level, level.relative_level) == (12, 0)


def test_skill_tooltip_lists_wildcard_bonus_first(sheet):
    sheet.add_bonus(Bonus(feature_id="skill.name/ritual magic", amount=1, source="Focus"))
    sheet.add_bonus(Bonus(feature_id="skill.name*", amount=1, source="Study"))
    level = sheet.find_skills("Ritual Magic", "Fire")[0].calculate_level(sheet.context())
    assert level.level == 15
    assert level.tooltip == "\nStudy [+1]\nFocus [+1]"


def test_find_skills(sheet):
    assert [skill.full_name for skill in sheet.find_skills("RITUAL MAGIC")] == [
        "Ritual Magic (Fire)",
        "Ritual Magic (Air)",
    ]


def test_str(sheet):
    assert str(sheet) == "Ayla"
