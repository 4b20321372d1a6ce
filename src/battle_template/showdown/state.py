from pydantic import BaseModel, Field

from src.battle_template.constants import MAX_MON_MOVES
from src.battle_template.data.game_strings import GameStrings
from src.battle_template.enums import EntityContext
from src.battle_template.schema.battle_template import BattleTemplate
from src.battle_template.stats import get_default_ivs


class ParserState(BaseModel):
    """Mutable state shared by the line handlers of a single parse"""

    template: BattleTemplate
    strings: GameStrings

    # Line stream bookkeeping
    move_count: int = Field(ge=0, le=MAX_MON_MOVES, default=0)
    first: bool = True  # next non-blank line is the species line
    finished: bool = False  # moves are complete; remaining lines are ignored

    class Config:
        frozen = False

    def invalid(self, message: str) -> None:
        self.template.add_invalid_line(message)

    def pin_context(self, context: EntityContext) -> None:
        """Set the era from an item table hit, moving Gen 1/2 templates onto DV defaults"""
        previous = self.template.context
        self.template.context = context
        if context.is_game_boy and self.template.ivs == get_default_ivs(previous):
            self.template.ivs = get_default_ivs(context)

    def upgrade_context(self, context: EntityContext) -> None:
        """Era pinned by a Gen 8+ field line; never moves backward"""
        self.template.context = self.template.context.upgrade(context)
