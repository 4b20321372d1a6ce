from typing import Iterable, Mapping, Protocol

from src.battle_template.data.game_strings import GameStrings, get_strings, registered_languages
from src.battle_template.enums import GENDERED_FORM_SPECIES, EntityContext
from src.battle_template.utils.string_util import find_index_ignore_case

MEGA_PREFIX = "Mega "
MEGA_TOKEN = "Mega-"


class FormResolver(Protocol):
    """Form-name and nickname collaborator used by the parser and generator"""

    def form_from_name(self, species: int, form_name: str, context: EntityContext) -> int: ...

    def form_name(self, species: int, form: int, context: EntityContext) -> str: ...

    def normalize_form_name(self, species: int, form_name: str, ability: int) -> str: ...

    def showdown_form_name(self, species: int, form_name: str) -> str: ...

    def is_nickname_custom(self, species: int, nickname: str, generation: int) -> bool: ...


class TableFormResolver:
    """
    Form resolver backed by per-species form name lists

    forms maps a species index to its form names, indexed by form number
    (form 0 is usually the empty base-form name). ability_forms maps
    (species, ability) to the form implied by that ability when the text
    does not name one.
    """

    def __init__(
        self,
        forms: Mapping[int, list[str]] | None = None,
        ability_forms: Mapping[tuple[int, int], str] | None = None,
        strings: Iterable[GameStrings] | None = None,
    ):
        self.forms: dict[int, list[str]] = dict(forms or {})
        self.ability_forms: dict[tuple[int, int], str] = dict(ability_forms or {})
        # None: consult every registered language at call time
        self._strings: list[GameStrings] | None = list(strings) if strings is not None else None

    def form_from_name(self, species: int, form_name: str, context: EntityContext) -> int:
        names = self.forms.get(species)
        if not form_name or not names:
            return 0
        index = find_index_ignore_case(names, form_name)
        return max(index, 0)

    def form_name(self, species: int, form: int, context: EntityContext) -> str:
        names = self.forms.get(species)
        if not names or not 0 <= form < len(names):
            return ""
        return names[form]

    def normalize_form_name(self, species: int, form_name: str, ability: int) -> str:
        if not form_name:
            return self.ability_forms.get((species, ability), "")
        if form_name.startswith(MEGA_TOKEN):
            return MEGA_PREFIX + form_name[len(MEGA_TOKEN) :]
        return form_name

    def showdown_form_name(self, species: int, form_name: str) -> str:
        return form_name

    def is_nickname_custom(self, species: int, nickname: str, generation: int) -> bool:
        """A nickname is custom unless it is the species name in some known language"""
        folded = nickname.casefold()
        for strings in self._iter_strings():
            if 0 <= species < len(strings.species) and strings.species[species].casefold() == folded:
                return False
        return True

    def _iter_strings(self) -> Iterable[GameStrings]:
        if self._strings is not None:
            return self._strings
        return [get_strings(language) for language in registered_languages()]


# Gendered forms are always known: form 0 is male, form 1 is female
GENDERED_FORMS = {int(species): ["M", "F"] for species in GENDERED_FORM_SPECIES}

DEFAULT_FORMS = TableFormResolver(forms=GENDERED_FORMS)
