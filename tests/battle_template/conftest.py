import pytest

from src.battle_template.data.forms import TableFormResolver
from src.battle_template.data.game_strings import GameStrings, register_strings, unregister_strings
from src.battle_template.showdown.parser import ShowdownParser

# Real national dex / move / ability / item indices for the names the tests use
SPECIES = {
    6: "Charizard",
    25: "Pikachu",
    29: "Nidoran♀",
    32: "Nidoran♂",
    37: "Vulpix",
    122: "Mr. Mime",
    128: "Tauros",
    132: "Ditto",
    137: "Porygon",
    250: "Ho-Oh",
    445: "Garchomp",
    474: "Porygon-Z",
    678: "Meowstic",
    782: "Jangmo-o",
    783: "Hakamo-o",
    784: "Kommo-o",
    876: "Indeedee",
    902: "Basculegion",
    916: "Oinkologne",
    1001: "Wo-Chien",
    1002: "Chien-Pao",
    1003: "Ting-Lu",
    1004: "Chi-Yu",
}
MOVES = {
    14: "Swords Dance",
    33: "Tackle",
    53: "Flamethrower",
    57: "Surf",
    58: "Ice Beam",
    85: "Thunderbolt",
    89: "Earthquake",
    164: "Substitute",
    182: "Protect",
    237: "Hidden Power",
    337: "Dragon Claw",
    369: "U-turn",
}
ABILITIES = {
    9: "Static",
    22: "Intimidate",
    24: "Rough Skin",
    26: "Levitate",
    46: "Pressure",
    88: "Download",
}
ITEMS = {
    213: "Bright Powder",
    234: "Leftovers",
    236: "Light Ball",
    270: "Life Orb",
    275: "Focus Sash",
    287: "Choice Scarf",
}
ITEMS_GEN3 = {179: "BrightPowder", 200: "Leftovers"}
ITEMS_GEN2 = {146: "Miracleberry", 115: "Leftovers"}

NATURES = [
    "Hardy", "Lonely", "Brave", "Adamant", "Naughty",
    "Bold", "Docile", "Relaxed", "Impish", "Lax",
    "Timid", "Hasty", "Serious", "Jolly", "Naive",
    "Modest", "Mild", "Quiet", "Bashful", "Rash",
    "Calm", "Gentle", "Sassy", "Careful", "Quirky",
]
TYPES = [
    "Normal", "Fighting", "Flying", "Poison", "Ground", "Rock",
    "Bug", "Ghost", "Steel", "Fire", "Water", "Grass",
    "Electric", "Psychic", "Ice", "Dragon", "Dark", "Fairy", "Stellar",
]


def _table(size: int, names: dict[int, str]) -> list[str]:
    """Positional name table padded with empty placeholders"""
    table = [""] * size
    for index, name in names.items():
        table[index] = name
    return table


def build_strings(language: str = "en") -> GameStrings:
    return GameStrings(
        language=language,
        species=_table(1026, SPECIES),
        moves=_table(920, MOVES),
        abilities=_table(311, ABILITIES),
        natures=list(NATURES),
        types=list(TYPES),
        items=_table(1000, ITEMS),
        items_gen2=_table(256, ITEMS_GEN2),
        items_gen3=_table(377, ITEMS_GEN3),
    )


FORMS = {
    6: ["", "Mega X", "Mega Y"],
    37: ["", "Alola"],
    128: ["", "Paldea-Combat", "Paldea-Blaze", "Paldea-Aqua"],
    678: ["M", "F"],
    784: ["", "Totem"],
}


@pytest.fixture(scope="session", autouse=True)
def english_strings():
    strings = build_strings()
    register_strings(strings)
    yield strings
    unregister_strings("en")


@pytest.fixture
def strings(english_strings):
    return english_strings


@pytest.fixture
def forms(english_strings):
    return TableFormResolver(forms=FORMS, strings=[english_strings])


@pytest.fixture
def parser(strings, forms):
    return ShowdownParser(strings=strings, forms=forms)
