from src.battle_template import hidden_power
from src.battle_template.config import DEFAULT_SETTINGS
from src.battle_template.constants import NUM_NATURES, NUM_STATS
from src.battle_template.data.forms import DEFAULT_FORMS, FormResolver
from src.battle_template.enums import Gender, Move
from src.battle_template.schema.battle_template import BattleTemplate
from src.battle_template.schema.creature import Creature
from src.battle_template.stats import get_max_iv


def template_from_creature(creature: Creature, forms: FormResolver | None = None) -> BattleTemplate:
    """Build the template describing a stored creature.

    A creature without a species yields an empty template.
    """
    forms = forms or DEFAULT_FORMS
    if creature.species == 0:
        return BattleTemplate.for_context(DEFAULT_SETTINGS.context)

    template = BattleTemplate(
        species=creature.species,
        context=creature.context,
        nickname=creature.nickname,
        held_item=creature.held_item,
        ability=creature.ability,
        evs=list(creature.evs),
        ivs=list(creature.ivs),
        moves=list(creature.moves),
        nature=creature.stat_nature,
        gender=Gender.from_value(creature.gender),
        friendship=creature.current_friendship,
        level=creature.current_level,
        shiny=creature.is_shiny,
    )

    if creature.can_gigantamax is not None:
        template.can_gigantamax = creature.can_gigantamax
    if creature.dynamax_level is not None:
        template.dynamax_level = creature.dynamax_level

    if Move.HIDDEN_POWER in creature.moves:
        template.hidden_power_type = hidden_power.get_type(template.ivs, template.context)
    if creature.tera_type is not None:
        template.tera_type = creature.tera_type

    # Hyper Training: battle IVs are treated as max
    if creature.hyper_trained is not None:
        max_iv = get_max_iv(template.context)
        for i in range(NUM_STATS):
            if creature.hyper_trained[i]:
                template.ivs[i] = max_iv

    template.form = creature.form
    template.form_name = forms.form_name(creature.species, creature.form, creature.context)
    return template


def interpret_as_preview(template: BattleTemplate, creature: Creature) -> None:
    """Force the nature a Gen 1/2 creature would get when transferred forward (EXP % 25)"""
    if creature.format <= 2:
        template.nature = creature.exp % NUM_NATURES
