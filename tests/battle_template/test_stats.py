import pytest

from src.battle_template.enums import EntityContext
from src.battle_template.stats import get_default_ivs, get_max_iv, get_stat_index_stored, get_stat_strings, parse_stat_tuples


def test_display_order_maps_to_storage_order():
    assert [get_stat_index_stored(i) for i in range(6)] == [0, 1, 2, 4, 5, 3]


@pytest.mark.parametrize("display_index", [-1, 6])
def test_display_index_out_of_range_raises(display_index):
    with pytest.raises(ValueError):
        get_stat_index_stored(display_index)


def test_max_iv_depends_on_era():
    assert get_max_iv(EntityContext.GEN1) == 15
    assert get_max_iv(EntityContext.GEN2) == 15
    assert get_max_iv(EntityContext.GEN3) == 31
    assert get_max_iv(EntityContext.NONE) == 31
    assert get_default_ivs(EntityContext.GEN2) == [15] * 6


def test_parse_tuples_writes_storage_positions():
    stats = [0] * 6
    invalid = parse_stat_tuples("252 Atk / 4 SpD / 252 Spe", stats, 0xFFFF, "EV")

    assert invalid == []
    assert stats == [0, 252, 0, 252, 0, 4]


def test_parse_tuples_labels_are_case_insensitive():
    stats = [31] * 6
    parse_stat_tuples("0 atk / 30 SPA", stats, 0xFF, "IV")
    assert stats == [31, 0, 31, 31, 30, 31]


def test_unlisted_stats_keep_their_value():
    stats = [31] * 6
    parse_stat_tuples("0 Atk", stats, 0xFF, "IV")
    assert stats == [31, 0, 31, 31, 31, 31]


@pytest.mark.parametrize(
    "tuple_text",
    [
        "252",  # no label
        "252 Foo",  # unknown label
        "abc Atk",  # not a number
        "-4 Atk",  # sign not allowed
        "",  # empty chunk
    ],
)
def test_invalid_tuple_is_reported_and_skipped(tuple_text):
    stats = [0] * 6
    invalid = parse_stat_tuples(f"4 HP / {tuple_text}", stats, 0xFFFF, "EV")

    assert invalid == [f"Invalid EV tuple: {tuple_text}"]
    assert stats == [4, 0, 0, 0, 0, 0]


def test_value_above_storage_limit_is_invalid():
    stats = [31] * 6
    invalid = parse_stat_tuples("256 HP", stats, 0xFF, "IV")

    assert invalid == ["Invalid IV tuple: 256 HP"]
    assert stats == [31] * 6


def test_storage_limit_itself_is_accepted():
    stats = [0] * 6
    assert parse_stat_tuples("65535 Spe", stats, 0xFFFF, "EV") == []
    assert stats[3] == 65535


def test_duplicate_label_keeps_first_value():
    stats = [0] * 6
    invalid = parse_stat_tuples("252 Atk / 100 Atk", stats, 0xFFFF, "EV")

    assert invalid == ["Duplicate EV tuple: 100 Atk"]
    assert stats[1] == 252


def test_stat_strings_use_display_order_and_skip_ignored_value():
    assert get_stat_strings([0, 252, 0, 252, 0, 4], 0) == ["252 Atk", "4 SpD", "252 Spe"]
    assert get_stat_strings([30, 29, 28, 27, 26, 25], 31) == ["30 HP", "29 Atk", "28 Def", "26 SpA", "25 SpD", "27 Spe"]
    assert get_stat_strings([31] * 6, 31) == []


def test_stat_strings_parse_back_to_the_same_array():
    original = [1, 2, 3, 4, 5, 6]
    parsed = [0] * 6
    parse_stat_tuples(" / ".join(get_stat_strings(original, 0)), parsed, 0xFFFF, "EV")
    assert parsed == original
