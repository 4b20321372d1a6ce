from src.battle_template.enums.context import EntityContext, LATEST_CONTEXT
from src.battle_template.enums.move import Move
from src.battle_template.enums.other import Gender, Type
from src.battle_template.enums.species import Species, DASHED_SPECIES, GENDERED_FORM_SPECIES
