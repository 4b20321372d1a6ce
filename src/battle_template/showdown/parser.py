"""
Set text parser

Turns loosely formatted set text into a BattleTemplate. Parsing is best
effort: a line that cannot be used is appended to template.invalid_lines
and the stream continues. Nothing in this module raises on bad input.

Line stream:
    1. first non-blank line  -> species line (see first_line.py)
    2. "Key: Value" lines    -> FIELD_HANDLERS
       "<Nature> Nature"     -> nature
    3. "- Move" lines        -> up to 4 moves; the 4th move, or any field
                                line once moves have started, ends the set
"""

import logging
from enum import Enum
from typing import Callable, Iterable, Optional

from src.battle_template import hidden_power
from src.battle_template.config import DEFAULT_SETTINGS, ParserSettings
from src.battle_template.constants import (
    LINE_SPLIT,
    MAX_DYNAMAX_LEVEL,
    MAX_EV_VALUE,
    MAX_FRIENDSHIP,
    MAX_IV_VALUE,
    MAX_LEVEL,
    MAX_MON_MOVES,
    MIN_LEVEL,
    MOVE_MARKERS,
    NATURE_SUFFIX,
    PAREN_JUNK,
)
from src.battle_template.data.forms import DEFAULT_FORMS, FormResolver
from src.battle_template.data.game_strings import GameStrings, get_strings
from src.battle_template.enums import GENDERED_FORM_SPECIES, EntityContext, Gender, Move, Type
from src.battle_template.schema.battle_template import BattleTemplate
from src.battle_template.showdown.first_line import parse_first_line
from src.battle_template.showdown.state import ParserState
from src.battle_template.stats import get_max_iv, parse_stat_tuples
from src.battle_template.utils.string_util import find_index_ignore_case, remove_all

logger = logging.getLogger(__name__)


class FieldKey(str, Enum):
    """Keys accepted on "Key: Value" lines"""

    ABILITY = "Ability"
    NATURE = "Nature"
    SHINY = "Shiny"
    GIGANTAMAX = "Gigantamax"
    FRIENDSHIP = "Friendship"
    EVS = "EVs"
    IVS = "IVs"
    LEVEL = "Level"
    DYNAMAX_LEVEL = "Dynamax Level"
    TERA_TYPE = "Tera Type"


# =============================================================================
# VALUE PARSING
# =============================================================================


def _parse_int(value: str) -> Optional[int]:
    value = value.strip()
    if not (value.isascii() and value.isdigit()):
        return None
    return int(value)


def _parse_ranged_int(value: str, minimum: int, maximum: int) -> Optional[int]:
    result = _parse_int(value)
    if result is None or not minimum <= result <= maximum:
        return None
    return result


def _parse_yes_no(value: str) -> Optional[bool]:
    folded = value.strip().casefold()
    if folded == "yes":
        return True
    if folded == "no":
        return False
    return None


# =============================================================================
# FIELD HANDLERS - each returns False when the value is rejected
# =============================================================================


def _set_ability(state: ParserState, value: str) -> bool:
    ability = state.strings.find_ability(value)
    if ability < 0:
        return False
    state.template.ability = ability
    return True


def _set_nature(state: ParserState, value: str) -> bool:
    nature = state.strings.find_nature(value)
    if nature < 0:
        return False
    state.template.nature = nature
    return True


def _set_shiny(state: ParserState, value: str) -> bool:
    shiny = _parse_yes_no(value)
    if shiny is None:
        return False
    state.template.shiny = shiny
    return True


def _set_gigantamax(state: ParserState, value: str) -> bool:
    gigantamax = _parse_yes_no(value)
    if gigantamax is None:
        return False
    state.template.can_gigantamax = gigantamax
    return True


def _set_friendship(state: ParserState, value: str) -> bool:
    friendship = _parse_ranged_int(value, 0, MAX_FRIENDSHIP)
    if friendship is None:
        return False
    state.template.friendship = friendship
    return True


def _set_evs(state: ParserState, value: str) -> bool:
    # Individual tuples are reported; the line itself is always accepted
    for message in parse_stat_tuples(value, state.template.evs, MAX_EV_VALUE, "EV"):
        state.invalid(message)
    return True


def _set_ivs(state: ParserState, value: str) -> bool:
    for message in parse_stat_tuples(value, state.template.ivs, MAX_IV_VALUE, "IV"):
        state.invalid(message)
    return True


def _set_level(state: ParserState, value: str) -> bool:
    level = _parse_ranged_int(value, MIN_LEVEL, MAX_LEVEL)
    if level is None:
        return False
    state.template.level = level
    return True


def _set_dynamax_level(state: ParserState, value: str) -> bool:
    state.upgrade_context(EntityContext.GEN8)
    dynamax_level = _parse_ranged_int(value, 0, MAX_DYNAMAX_LEVEL)
    if dynamax_level is None:
        return False
    state.template.dynamax_level = dynamax_level
    return True


def _set_tera_type(state: ParserState, value: str) -> bool:
    state.upgrade_context(EntityContext.GEN9)
    index = state.strings.find_type(value)
    if index < 0:
        return False
    try:
        state.template.tera_type = Type(index)
    except ValueError:
        return False
    return True


FIELD_HANDLERS: dict[FieldKey, Callable[[ParserState, str], bool]] = {
    FieldKey.ABILITY: _set_ability,
    FieldKey.NATURE: _set_nature,
    FieldKey.SHINY: _set_shiny,
    FieldKey.GIGANTAMAX: _set_gigantamax,
    FieldKey.FRIENDSHIP: _set_friendship,
    FieldKey.EVS: _set_evs,
    FieldKey.IVS: _set_ivs,
    FieldKey.LEVEL: _set_level,
    FieldKey.DYNAMAX_LEVEL: _set_dynamax_level,
    FieldKey.TERA_TYPE: _set_tera_type,
}


class ShowdownParser:
    """
    Parser for the set text format

    The name tables, form resolver and settings are read-only and may be
    shared between parsers; each call to parse() owns its own state.

    Without strings, the table registered for settings.language is used, so
    register_strings() must have been called first (KeyError otherwise).
    """

    def __init__(self, strings: GameStrings | None = None, forms: FormResolver | None = None, settings: ParserSettings | None = None):
        self.settings = settings or DEFAULT_SETTINGS
        self.strings = strings or get_strings(self.settings.language)
        self.forms = forms or DEFAULT_FORMS

    def parse(self, text: str) -> BattleTemplate:
        return self.parse_lines(text.splitlines())

    def parse_lines(self, lines: Iterable[str]) -> BattleTemplate:
        state = ParserState(template=BattleTemplate.for_context(self.settings.context), strings=self.strings)
        for line in lines:
            self._read_line(state, line)
            if state.finished:
                break
        self._sanitize_result(state)
        return state.template

    # =========================================================================
    # LINE CLASSIFICATION
    # =========================================================================

    def _read_line(self, state: ParserState, line: str) -> None:
        trimmed = line.strip()
        if not trimmed:
            return

        # The species line is always attempted; single-glyph names exist in some languages
        if state.first:
            state.first = False
            parse_first_line(state, trimmed)
            return

        if self._is_length_out_of_range(trimmed):
            logger.debug(f"Skipping line with out-of-range length: {line!r}")
            state.invalid(line)
            return

        state.finished = self._parse_line(state, trimmed)

    def _is_length_out_of_range(self, line: str) -> bool:
        return not self.settings.min_line_length <= len(line) <= self.settings.max_line_length

    def _parse_line(self, state: ParserState, line: str) -> bool:
        """Handle one set line. Returns True when the set is complete."""
        if line[0] in MOVE_MARKERS:
            return self._parse_move_line(state, line)

        if state.move_count != 0:
            logger.debug(f"Field line after moves ends the set: {line}")
            return True

        split = line.find(LINE_SPLIT)
        if split == -1:
            valid = self._parse_single(state, line)
        else:
            key = line[:split].strip()
            value = line[split + len(LINE_SPLIT) :].strip()
            valid = self._parse_entry(state, key, value)

        if not valid:
            logger.debug(f"Rejected line: {line}")
            state.invalid(line)
        return False

    def _parse_single(self, state: ParserState, line: str) -> bool:
        """<Nature> Nature"""
        if not line.casefold().endswith(NATURE_SUFFIX.casefold()):
            return False
        first_space = line.find(" ")
        if first_space == -1:
            return False
        return _set_nature(state, line[:first_space])

    def _parse_entry(self, state: ParserState, key: str, value: str) -> bool:
        try:
            field = FieldKey(key)
        except ValueError:
            return False
        return FIELD_HANDLERS[field](state, value)

    # =========================================================================
    # MOVES
    # =========================================================================

    def _parse_move_line(self, state: ParserState, line: str) -> bool:
        move_name = self._parse_move_name(state, line)
        move = state.strings.find_move(move_name)
        if move <= 0:
            state.invalid(f"Unknown Move: {move_name}")
        elif state.template.has_move(move):
            state.invalid(f"Duplicate Move: {move_name}")
        else:
            state.template.moves[state.move_count] = move
            state.move_count += 1
        return state.move_count == MAX_MON_MOVES

    def _parse_move_name(self, state: ParserState, line: str) -> str:
        start = 2 if len(line) > 1 and line[1] == " " else 1
        option = line.find("/")  # "- Move / Alternative" keeps the first choice
        move_name = (line[start:option] if option != -1 else line[start:]).strip()

        hidden_power_name = self._get_hidden_power_name(state.strings)
        if not hidden_power_name or move_name[: len(hidden_power_name)].casefold() != hidden_power_name.casefold():
            return move_name
        if len(move_name) == len(hidden_power_name):
            return hidden_power_name

        # Hidden Power [Type]
        type_name = remove_all(move_name[len(hidden_power_name) :], PAREN_JUNK).strip()
        self._apply_hidden_power_type(state, type_name)
        return hidden_power_name

    @staticmethod
    def _get_hidden_power_name(strings: GameStrings) -> str:
        if Move.HIDDEN_POWER >= len(strings.moves):
            return ""
        return strings.moves[Move.HIDDEN_POWER]

    def _apply_hidden_power_type(self, state: ParserState, type_name: str) -> None:
        """
        Reconcile a requested Hidden Power type with the IVs

        IVs not all at max: the IVs are adjusted to produce the requested type.
        IVs all at max: the IVs are kept and the type they imply is reported.
        """
        template = state.template
        hp_type = find_index_ignore_case(state.strings.types[1:], type_name)  # Normal is not a Hidden Power type
        max_iv = get_max_iv(template.context)

        if any(iv != max_iv for iv in template.ivs):
            if hidden_power.set_ivs_for_type(hp_type, template.ivs, template.context):
                template.hidden_power_type = hp_type
            else:
                state.invalid(f"Invalid IVs for Hidden Power Type: {type_name}")
            return

        if not hidden_power.is_valid_type(hp_type):
            state.invalid(f"Invalid Hidden Power Type: {type_name}")
        template.hidden_power_type = hidden_power.get_type(template.ivs, template.context)

    # =========================================================================
    # POST-PROCESSING
    # =========================================================================

    def _sanitize_result(self, state: ParserState) -> None:
        template = state.template
        template.form_name = self.forms.normalize_form_name(template.species, template.form_name, template.ability)
        template.form = self.forms.form_from_name(template.species, template.form_name, template.context)

        if template.species in GENDERED_FORM_SPECIES:
            self._revise_gendered_forms(template)

    @staticmethod
    def _revise_gendered_forms(template: BattleTemplate) -> None:
        if template.gender == Gender.FEMALE:
            template.form_name = "F"
            template.form = 1
        else:
            template.form_name = "F" if template.form == 1 else "M"
            template.gender = Gender.from_value(template.form)


def parse_template(text: str, strings: GameStrings | None = None, forms: FormResolver | None = None, settings: ParserSettings | None = None) -> BattleTemplate:
    """Parse one set's text"""
    return ShowdownParser(strings, forms, settings).parse(text)
