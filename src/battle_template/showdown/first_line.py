"""
Species line disambiguation

The first line of a set carries nickname, species, form, gender and held item:

    Nickname (Species-Form) (F) @ Item

Every piece is optional apart from the species, and older exports invert the
nickname and species. Each step below only runs when the previous one failed,
and the first success is final.
"""

import logging
from typing import Callable, Optional

from src.battle_template.constants import FEMALE_SUFFIX, GMAX_SUFFIX, ITEM_SPLIT, MALE_SUFFIX, PAREN_JUNK
from src.battle_template.data.game_strings import GameStrings
from src.battle_template.enums import DASHED_SPECIES, EntityContext, Gender
from src.battle_template.showdown.state import ParserState
from src.battle_template.utils.string_util import remove_all

logger = logging.getLogger(__name__)

# Item names changed between eras; older tables are tried after the current one
ITEM_FALLBACK_CONTEXTS = (EntityContext.GEN3, EntityContext.GEN2)

SpeciesMatch = Optional[tuple[int, str]]  # (species, form name)


def parse_first_line(state: ParserState, line: str) -> None:
    item_split = line.find(ITEM_SPLIT)
    if item_split != -1:
        parse_item_name(state, line[item_split + len(ITEM_SPLIT) :].strip())
        line = line[:item_split]
    parse_first_line_no_item(state, line)


def parse_item_name(state: ParserState, item_name: str) -> bool:
    """Resolve the held item, pinning the era of the table it was found in

    The current era's table wins, so a name shared with the modern table never
    pins Gen 1/2.
    """
    for context in (state.template.context, *ITEM_FALLBACK_CONTEXTS):
        item = state.strings.find_item(item_name, context)
        if item < 0:
            continue
        state.template.held_item = item
        state.pin_context(context)
        return True

    logger.debug(f"Item not found in any era table: {item_name}")
    state.invalid(f"Unknown Item: {item_name}")
    return False


def parse_first_line_no_item(state: ParserState, line: str) -> None:
    line = line.strip()

    # Gender Detection
    if line.endswith(MALE_SUFFIX):
        line = line[: -len(MALE_SUFFIX)]
        state.template.gender = Gender.MALE
    elif line.endswith(FEMALE_SUFFIX):
        line = line[: -len(FEMALE_SUFFIX)]
        state.template.gender = Gender.FEMALE

    # Nickname Detection
    if "(" in line and ")" in line:
        resolved = parse_species_nickname(state, line)
    else:
        resolved = parse_species_form(state, line)

    if not resolved:
        state.invalid(f"Unknown Species: {line.strip()}")


def parse_species_nickname(state: ParserState, line: str) -> bool:
    index = line.rfind("(")
    if index > 1:
        # Nickname (Species)
        nickname = line[:index].strip()
        species = remove_all(line[index:].strip(), PAREN_JUNK)
    else:
        # (Species) Nickname, written by some older exporters
        end = line.find(")")
        species = line[index + 1 : end]
        nickname = line[end + 2 :] if end < len(line) - 2 else ""

    if parse_species_form(state, species):
        state.template.nickname = nickname.strip()
        return True
    if parse_species_form(state, nickname):
        state.template.nickname = species.strip()
        return True
    return False


def parse_species_form(state: ParserState, text: str) -> bool:
    text = text.strip()
    if not text:
        return False

    gigantamax = text.endswith(GMAX_SUFFIX)
    if gigantamax:
        text = text[: -len(GMAX_SUFFIX)]

    for attempt in SPECIES_ATTEMPTS:
        match = attempt(state.strings, text)
        if match is None:
            continue
        state.template.species, state.template.form_name = match
        if gigantamax:
            state.template.can_gigantamax = True
        return True
    return False


# =============================================================================
# SPECIES MATCHING - tried in order, first hit wins
# =============================================================================


def _match_exact(strings: GameStrings, text: str) -> SpeciesMatch:
    """Whole text is a species name (covers names that contain a hyphen)"""
    species = strings.find_species(text)
    if species > 0:
        return species, ""
    return None


def _match_first_hyphen(strings: GameStrings, text: str) -> SpeciesMatch:
    """Species-Form"""
    end = text.find("-")
    if end < 0:
        return None
    species = strings.find_species(text[:end])
    if species > 0:
        return species, text[end + 1 :]
    return None


def _match_dashed_species(strings: GameStrings, text: str) -> SpeciesMatch:
    """Names like Ho-Oh or Nidoran-F that the hyphen split breaks apart"""
    for species in DASHED_SPECIES:
        if species >= len(strings.species) or not strings.species[species]:
            continue
        name = strings.species[species].replace("♂", "-M").replace("♀", "-F")
        if not text.startswith(name):
            continue
        rest = text[len(name) :]
        return int(species), rest[1:] if rest.startswith("-") else rest
    return None


def _match_last_hyphen(strings: GameStrings, text: str) -> SpeciesMatch:
    """Species-With-Hyphen-Form, split at the last hyphen"""
    first = text.find("-")
    if first < 0:
        return None
    end = text.rfind("-", max(0, first - 1))
    if end <= first:
        return None
    species = strings.find_species(text[:end])
    if species > 0:
        return species, text[end + 1 :]
    return None


SPECIES_ATTEMPTS: tuple[Callable[[GameStrings, str], SpeciesMatch], ...] = (
    _match_exact,
    _match_first_hyphen,
    _match_dashed_species,
    _match_last_hyphen,
)
