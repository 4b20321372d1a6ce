"""
Canonical set text generator

The inverse of parser.py. Every optional line is omitted when its value is
the default, so generate(parse(text)) only carries non-default fields.
"""

import os

from src.battle_template.constants import DEFAULT_DYNAMAX_LEVEL, DEFAULT_EV, DEFAULT_LEVEL, ITEM_SPLIT
from src.battle_template.data.forms import DEFAULT_FORMS, MEGA_PREFIX, MEGA_TOKEN, FormResolver
from src.battle_template.data.game_strings import GameStrings, get_strings
from src.battle_template.config import DEFAULT_SETTINGS
from src.battle_template.enums import EntityContext, Move, Species, Type
from src.battle_template.hidden_power import is_valid_type
from src.battle_template.schema.battle_template import BattleTemplate
from src.battle_template.stats import JOINER, get_max_iv, get_stat_strings


def get_set_lines(template: BattleTemplate, strings: GameStrings | None = None, forms: FormResolver | None = None) -> list[str]:
    """
    Canonical lines for a template, in format order

    Returns an empty list when the species is unset or outside the species table.
    Without strings, the table registered for DEFAULT_SETTINGS.language is used;
    get_strings() raises KeyError if none was registered.

    The era itself is not written. Gen 1/2 templates read back as Gen 1/2 only
    when the item name is unique to an old item table; otherwise the text is
    read as an unpinned template and IVs left out at 15 come back as 31.
    """
    strings = strings or get_strings(DEFAULT_SETTINGS.language)
    forms = forms or DEFAULT_FORMS
    if not 0 < template.species < len(strings.species):
        return []

    result = [_get_first_line(template, strings, forms)]

    ivs = get_stat_strings(template.ivs, get_max_iv(template.context))
    if ivs:
        result.append(f"IVs: {JOINER.join(ivs)}")

    evs = get_stat_strings(template.evs, DEFAULT_EV)
    if evs:
        result.append(f"EVs: {JOINER.join(evs)}")

    if 0 <= template.ability < len(strings.abilities):
        result.append(f"Ability: {strings.abilities[template.ability]}")
    if template.tera_type != Type.ANY and template.tera_type < len(strings.types):
        result.append(f"Tera Type: {strings.types[template.tera_type]}")
    if template.level != DEFAULT_LEVEL:
        result.append(f"Level: {template.level}")
    if template.shiny:
        result.append("Shiny: Yes")
    if template.dynamax_level != DEFAULT_DYNAMAX_LEVEL and template.context == EntityContext.GEN8:
        result.append(f"Dynamax Level: {template.dynamax_level}")
    if template.can_gigantamax:
        result.append("Gigantamax: Yes")

    if 0 <= template.nature < len(strings.natures):
        result.append(f"{strings.natures[template.nature]} Nature")

    result.extend(_get_move_lines(template, strings))
    return result


def get_template_text(template: BattleTemplate, strings: GameStrings | None = None, forms: FormResolver | None = None) -> str:
    """Canonical text, joined with the platform line ending"""
    return os.linesep.join(get_set_lines(template, strings, forms))


def localized_text(template: BattleTemplate, language: str, forms: FormResolver | None = None) -> str:
    """Canonical text using a registered language's name tables"""
    return get_template_text(template, get_strings(language), forms)


def _get_first_line(template: BattleTemplate, strings: GameStrings, forms: FormResolver) -> str:
    """Nickname (Species-Form) (G) @ Item"""
    species_form = strings.species[template.species]
    form = forms.showdown_form_name(template.species, template.form_name)
    if form:
        species_form += f"-{form.replace(MEGA_PREFIX, MEGA_TOKEN)}"
    elif template.species == Species.NIDORAN_M:
        species_form = species_form.replace("♂", "-M")
    elif template.species == Species.NIDORAN_F:
        species_form = species_form.replace("♀", "-F")

    result = _get_species_nickname(template, strings, forms, species_form)

    # omit genderless or nonspecific
    result += template.gender.suffix

    if template.held_item > 0:
        items = strings.get_item_strings(template.context)
        if template.held_item < len(items):
            result += f"{ITEM_SPLIT}{items[template.held_item]}"
    return result


def _get_species_nickname(template: BattleTemplate, strings: GameStrings, forms: FormResolver, species_form: str) -> str:
    nickname = template.nickname
    if not nickname or nickname.casefold() == strings.species[template.species].casefold():
        return species_form
    if not forms.is_nickname_custom(template.species, nickname, template.context.generation):
        return species_form
    return f"{nickname} ({species_form})"


def _get_move_lines(template: BattleTemplate, strings: GameStrings) -> list[str]:
    lines = []
    for move in template.moves:
        if move <= Move.NONE or move >= len(strings.moves):
            continue
        name = strings.moves[move]
        if move != Move.HIDDEN_POWER or not is_valid_type(template.hidden_power_type):
            lines.append(f"- {name}")
            continue
        type_index = template.hidden_power_type + 1  # skip Normal
        if type_index < len(strings.types):
            lines.append(f"- {name} [{strings.types[type_index]}]")
        else:
            lines.append(f"- {name}")
    return lines
