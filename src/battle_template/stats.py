"""
Stat arrays and the "<value> <label> / <value> <label>" tuple grammar

Arrays are kept in storage order (HP, Atk, Def, Spe, SpA, SpD). Text is
written in display order (HP, Atk, Def, SpA, SpD, Spe). The permutation
between the two lives only in get_stat_index_stored().
"""

from typing import MutableSequence, Sequence

from src.battle_template.constants import NUM_STATS, STAT_NAMES, MAX_PER_STAT_IVS, MAX_PER_STAT_DVS
from src.battle_template.enums import EntityContext
from src.battle_template.utils.string_util import find_index_ignore_case

STAT_SEPARATOR = "/"
JOINER = " / "


def get_stat_index_stored(display_index: int) -> int:
    """Map a display position to its storage position"""
    if not 0 <= display_index < NUM_STATS:
        raise ValueError(f"Stat index must be 0-{NUM_STATS - 1}")
    if display_index == 3:
        return 4
    if display_index == 4:
        return 5
    if display_index == 5:
        return 3
    return display_index


def get_max_iv(context: EntityContext) -> int:
    return MAX_PER_STAT_DVS if context.is_game_boy else MAX_PER_STAT_IVS


def get_default_ivs(context: EntityContext) -> list[int]:
    return [get_max_iv(context)] * NUM_STATS


def parse_stat_tuples(text: str, stats: MutableSequence[int], max_value: int, kind: str) -> list[str]:
    """
    Absorb "<value> <label>" tuples separated by "/" into stats

    Args:
        text: value portion of an EVs/IVs line
        stats: storage-ordered array, updated in place
        max_value: largest storable value (255 for IVs, 65535 for EVs)
        kind: "EV" or "IV", used in diagnostics

    Returns:
        One diagnostic per rejected tuple. Labels without a tuple keep their value.
    """
    invalid: list[str] = []
    seen: set[int] = set()
    for chunk in text.split(STAT_SEPARATOR):
        tuple_text = chunk.strip()
        parsed = _parse_tuple(tuple_text, max_value)
        if parsed is None:
            invalid.append(f"Invalid {kind} tuple: {tuple_text}")
            continue
        stat_index, value = parsed
        if stat_index in seen:
            invalid.append(f"Duplicate {kind} tuple: {tuple_text}")
            continue
        seen.add(stat_index)
        stats[stat_index] = value
    return invalid


def _parse_tuple(text: str, max_value: int) -> tuple[int, int] | None:
    space = text.find(" ")
    if space == -1:
        return None
    stat_index = find_index_ignore_case(STAT_NAMES, text[space + 1 :].strip())
    if stat_index == -1:
        return None
    value = text[:space].strip()
    if not (value.isascii() and value.isdigit()):
        return None
    stat_value = int(value)
    if stat_value > max_value:
        return None
    return stat_index, stat_value


def get_stat_strings(stats: Sequence[int], ignore_value: int) -> list[str]:
    """Render "<value> <label>" in display order, skipping values equal to ignore_value"""
    result = []
    for display_index in range(NUM_STATS):
        stat_index = get_stat_index_stored(display_index)
        value = stats[stat_index]
        if value == ignore_value:
            continue
        result.append(f"{value} {STAT_NAMES[stat_index]}")
    return result
