"""
Hidden Power type codec

Hidden Power's type is not stored; it is derived from the IVs. Types are
numbered 0-15 starting at Fighting (Normal cannot be rolled), so the type
name for value t is types[t + 1].

Gen 3+: the low bit of each IV (storage order HP, Atk, Def, Spe, SpA, SpD)
forms a 6-bit number n, and type = n * 15 // 63.
Gen 1/2: type = ((Atk DV & 3) << 2) | (Def DV & 3).
"""

from typing import MutableSequence, Sequence

from src.battle_template.constants import NUM_STATS, STAT_ATK, STAT_DEF
from src.battle_template.enums import EntityContext

HIDDEN_POWER_TYPE_COUNT = 16

# Low bits giving each type with the fewest IVs lowered from max (Fighting..Dark)
DEFAULT_LOW_BITS = (
    0b000011,  # Fighting
    0b001000,  # Flying
    0b001011,  # Poison
    0b001111,  # Ground
    0b010011,  # Rock
    0b011001,  # Bug
    0b011101,  # Ghost
    0b011111,  # Steel
    0b100101,  # Fire
    0b101001,  # Water
    0b101101,  # Grass
    0b110001,  # Electric
    0b110101,  # Psychic
    0b111001,  # Ice
    0b111101,  # Dragon
    0b111111,  # Dark
)

# Bit flip masks, fewest changed IVs first
_FLIP_ORDER = sorted(range(1, 1 << NUM_STATS), key=lambda mask: (bin(mask).count("1"), mask))


def is_valid_type(hp_type: int) -> bool:
    return 0 <= hp_type < HIDDEN_POWER_TYPE_COUNT


def get_type(ivs: Sequence[int], context: EntityContext) -> int:
    """Hidden Power type implied by the IVs"""
    if context.is_game_boy:
        return ((ivs[STAT_ATK] & 3) << 2) | (ivs[STAT_DEF] & 3)
    return _get_low_bits(ivs) * 15 // 63


def _get_low_bits(ivs: Sequence[int]) -> int:
    value = 0
    for i in range(NUM_STATS):
        value |= (ivs[i] & 1) << i
    return value


def set_ivs(hp_type: int, ivs: MutableSequence[int], context: EntityContext) -> None:
    """Overwrite the low bits of the IVs with the canonical pattern for hp_type"""
    if not is_valid_type(hp_type):
        raise ValueError(f"Hidden Power type must be 0-{HIDDEN_POWER_TYPE_COUNT - 1}")
    if context.is_game_boy:
        ivs[STAT_ATK] = (ivs[STAT_ATK] & ~3) | (hp_type >> 2)
        ivs[STAT_DEF] = (ivs[STAT_DEF] & ~3) | (hp_type & 3)
        return
    bits = DEFAULT_LOW_BITS[hp_type]
    for i in range(NUM_STATS):
        ivs[i] = (ivs[i] & ~1) | ((bits >> i) & 1)


def set_ivs_for_type(hp_type: int, ivs: MutableSequence[int], context: EntityContext) -> bool:
    """
    Adjust the IVs so they produce hp_type, changing as few IVs as possible

    Returns:
        False if hp_type is not a Hidden Power type (IVs untouched), True otherwise
    """
    if not is_valid_type(hp_type):
        return False
    if get_type(ivs, context) == hp_type:
        return True
    if context.is_game_boy:
        set_ivs(hp_type, ivs, context)
        return True

    for mask in _FLIP_ORDER:
        candidate = [ivs[i] ^ ((mask >> i) & 1) for i in range(NUM_STATS)]
        if get_type(candidate, context) == hp_type:
            ivs[:] = candidate
            return True
    return False
