from pydantic import BaseModel, Field

from src.battle_template.constants import DEFAULT_LANGUAGE, MIN_LINE_LENGTH, MAX_LINE_LENGTH
from src.battle_template.enums import EntityContext


class ParserSettings(BaseModel):
    """Defaults applied when a template is parsed or generated without explicit arguments"""

    language: str = Field(default=DEFAULT_LANGUAGE, min_length=1)
    context: EntityContext = EntityContext.NONE  # starting era before any line pins it

    # Lines outside this range are noise (the first line is always attempted)
    min_line_length: int = Field(default=MIN_LINE_LENGTH, ge=0)
    max_line_length: int = Field(default=MAX_LINE_LENGTH, ge=1)

    class Config:
        frozen = True


DEFAULT_SETTINGS = ParserSettings()
