from typing import Optional

from pydantic import BaseModel, Field

from src.battle_template.enums import EntityContext, Type


class Creature(BaseModel):
    """Stored creature record a template can be exported from"""

    # Identity
    species: int = Field(ge=0)
    form: int = Field(ge=0, le=255, default=0)
    context: EntityContext
    format: int = Field(ge=1, le=9)  # generation the record is stored in
    nickname: str = ""

    # Stats - storage order (HP, Atk, Def, Spe, SpA, SpD)
    evs: list[int] = Field(default_factory=lambda: [0, 0, 0, 0, 0, 0], min_length=6, max_length=6)  # u16[6]
    ivs: list[int] = Field(default_factory=lambda: [31, 31, 31, 31, 31, 31], min_length=6, max_length=6)  # u8[6]

    # Moves
    moves: list[int] = Field(default_factory=lambda: [0, 0, 0, 0], min_length=4, max_length=4)  # u16[4]

    # Current state
    held_item: int = Field(ge=0, le=65535, default=0)  # u16
    ability: int = Field(ge=0, le=65535, default=0)  # u16
    stat_nature: int = Field(ge=0, le=24, default=0)  # u8
    gender: int = Field(ge=0, le=3, default=2)  # 0 male, 1 female, 2 genderless
    current_friendship: int = Field(ge=0, le=255, default=0)  # u8
    current_level: int = Field(ge=1, le=100, default=100)  # u8
    is_shiny: bool = False
    exp: int = Field(ge=0, le=4294967295, default=0)  # u32

    # Only present on formats that support them
    can_gigantamax: Optional[bool] = None
    dynamax_level: Optional[int] = Field(default=None, ge=0, le=10)
    tera_type: Optional[Type] = None
    hyper_trained: Optional[list[bool]] = Field(default=None, min_length=6, max_length=6)  # storage order
