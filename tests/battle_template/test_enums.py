import pytest

from src.battle_template.enums import EntityContext, Gender


def test_context_upgrade_only_moves_forward():
    assert EntityContext.NONE.upgrade(EntityContext.GEN8) == EntityContext.GEN8
    assert EntityContext.GEN9.upgrade(EntityContext.GEN8) == EntityContext.GEN9
    assert EntityContext.GEN3.upgrade(EntityContext.GEN3) == EntityContext.GEN3


def test_unpinned_context_reports_latest_generation():
    assert EntityContext.NONE.generation == 9
    assert EntityContext.GEN4.generation == 4


def test_game_boy_contexts():
    assert EntityContext.GEN1.is_game_boy
    assert EntityContext.GEN2.is_game_boy
    assert not EntityContext.GEN3.is_game_boy
    assert not EntityContext.NONE.is_game_boy


def test_context_from_generation():
    assert EntityContext.from_generation(7) == EntityContext.GEN7
    with pytest.raises(ValueError):
        EntityContext.from_generation(0)
    with pytest.raises(ValueError):
        EntityContext.from_generation(10)


def test_gender_suffix_and_value():
    assert Gender.MALE.suffix == " (M)"
    assert Gender.FEMALE.suffix == " (F)"
    assert Gender.UNSPECIFIED.suffix == ""
    assert Gender.from_value(1) == Gender.FEMALE
    assert Gender.from_value(3) == Gender.UNSPECIFIED
