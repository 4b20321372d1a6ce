"""
Localized name tables consumed by the parser and generator

Every table is positional: the index of a name is the value stored in a
BattleTemplate. Lookups are case-insensitive and return the first match.
"""

import logging
from pathlib import Path

from pydantic import BaseModel, Field

from src.battle_template.enums import EntityContext
from src.battle_template.utils.string_util import find_index_ignore_case

logger = logging.getLogger(__name__)

# Resource file stems, read as text_<kind>_<language>.txt
TABLE_FILES = {
    "species": "species",
    "moves": "moves",
    "abilities": "abilities",
    "natures": "natures",
    "types": "types",
    "items": "items",
    "items_gen1": "items_g1",
    "items_gen2": "items_g2",
    "items_gen3": "items_g3",
}


class GameStrings(BaseModel):
    """Name tables for one display language"""

    language: str
    species: list[str] = Field(default_factory=list)
    moves: list[str] = Field(default_factory=list)
    abilities: list[str] = Field(default_factory=list)
    natures: list[str] = Field(default_factory=list)
    types: list[str] = Field(default_factory=list)

    # Item names changed between eras; the modern list is the fallback
    items: list[str] = Field(default_factory=list)
    items_gen1: list[str] = Field(default_factory=list)
    items_gen2: list[str] = Field(default_factory=list)
    items_gen3: list[str] = Field(default_factory=list)

    class Config:
        frozen = True

    def get_item_strings(self, context: EntityContext) -> list[str]:
        """Item table for an era"""
        era_tables = {
            EntityContext.GEN1: self.items_gen1,
            EntityContext.GEN2: self.items_gen2,
            EntityContext.GEN3: self.items_gen3,
        }
        table = era_tables.get(context)
        return table if table else self.items

    def find_species(self, name: str) -> int:
        return find_index_ignore_case(self.species, name)

    def find_move(self, name: str) -> int:
        return find_index_ignore_case(self.moves, name)

    def find_ability(self, name: str) -> int:
        return find_index_ignore_case(self.abilities, name)

    def find_nature(self, name: str) -> int:
        return find_index_ignore_case(self.natures, name)

    def find_type(self, name: str) -> int:
        return find_index_ignore_case(self.types, name)

    def find_item(self, name: str, context: EntityContext) -> int:
        return find_index_ignore_case(self.get_item_strings(context), name)

    @classmethod
    def from_directory(cls, path: str | Path, language: str) -> "GameStrings":
        """Load tables from one-name-per-line files; missing era item files are left empty"""
        directory = Path(path)
        tables: dict[str, list[str]] = {}
        for field, stem in TABLE_FILES.items():
            file = directory / f"text_{stem}_{language}.txt"
            if not file.exists():
                if not field.startswith("items_gen"):
                    raise FileNotFoundError(f"Missing name table: {file}")
                continue
            tables[field] = file.read_text(encoding="utf-8-sig").splitlines()
        return cls(language=language, **tables)


# =============================================================================
# LANGUAGE REGISTRY
# =============================================================================
_REGISTRY: dict[str, GameStrings] = {}


def register_strings(strings: GameStrings) -> None:
    """Make a table available to get_strings() under its language code"""
    _REGISTRY[strings.language] = strings
    logger.info(f"Registered name tables for language: {strings.language}")


def get_strings(language: str) -> GameStrings:
    """Look up a registered table. Raises KeyError for unknown languages."""
    try:
        return _REGISTRY[language]
    except KeyError:
        raise KeyError(f"No name tables registered for language: {language}") from None


def registered_languages() -> list[str]:
    return list(_REGISTRY)


def unregister_strings(language: str) -> None:
    _REGISTRY.pop(language, None)
