from pydantic import BaseModel, Field

from src.battle_template.constants import (
    DEFAULT_DYNAMAX_LEVEL,
    DEFAULT_FRIENDSHIP,
    DEFAULT_LEVEL,
    MAX_DYNAMAX_LEVEL,
    MAX_FRIENDSHIP,
    MAX_LEVEL,
    MAX_MON_MOVES,
    MIN_LEVEL,
    NO_SELECTION,
    NUM_STATS,
)
from src.battle_template.enums import EntityContext, Gender, Move, Type
from src.battle_template.stats import get_default_ivs


class BattleTemplate(BaseModel):
    """
    One creature's competitively relevant attributes, as carried by the set text format

    Stat arrays are in storage order (HP, Atk, Def, Spe, SpA, SpD).
    invalid_lines collects every line the parser could not use; parsing never raises.
    """

    # Identity
    species: int = Field(ge=0, default=0)  # 0 = unset / unresolved
    form: int = Field(ge=0, le=255, default=0)
    form_name: str = ""  # empty = base form
    nickname: str = ""

    # Era and display
    context: EntityContext = EntityContext.NONE
    gender: Gender = Gender.UNSPECIFIED

    # Core battle fields
    held_item: int = Field(ge=0, default=0)
    ability: int = Field(ge=NO_SELECTION, default=NO_SELECTION)
    nature: int = Field(ge=NO_SELECTION, default=NO_SELECTION)
    level: int = Field(ge=MIN_LEVEL, le=MAX_LEVEL, default=DEFAULT_LEVEL)
    friendship: int = Field(ge=0, le=MAX_FRIENDSHIP, default=DEFAULT_FRIENDSHIP)
    shiny: bool = False
    hidden_power_type: int = Field(ge=NO_SELECTION, le=15, default=NO_SELECTION)

    # Stats
    evs: list[int] = Field(default_factory=lambda: [0] * NUM_STATS, min_length=NUM_STATS, max_length=NUM_STATS)
    ivs: list[int] = Field(default_factory=lambda: get_default_ivs(EntityContext.NONE), min_length=NUM_STATS, max_length=NUM_STATS)

    # Moves - 0 = empty slot
    moves: list[int] = Field(default_factory=lambda: [0] * MAX_MON_MOVES, min_length=MAX_MON_MOVES, max_length=MAX_MON_MOVES)

    # Gen 8/9 extras
    tera_type: Type = Type.ANY
    dynamax_level: int = Field(ge=0, le=MAX_DYNAMAX_LEVEL, default=DEFAULT_DYNAMAX_LEVEL)
    can_gigantamax: bool = False

    # Lines that failed to parse, in input order
    invalid_lines: list[str] = Field(default_factory=list)

    class Config:
        frozen = False

    @classmethod
    def for_context(cls, context: EntityContext) -> "BattleTemplate":
        """Empty template with the era's default IVs"""
        return cls(context=context, ivs=get_default_ivs(context))

    @property
    def has_hidden_power(self) -> bool:
        return Move.HIDDEN_POWER in self.moves

    @property
    def move_count(self) -> int:
        return sum(1 for move in self.moves if move != Move.NONE)

    def has_move(self, move: int) -> bool:
        return move != Move.NONE and move in self.moves

    def add_invalid_line(self, line: str) -> None:
        self.invalid_lines.append(line)
