from src.battle_template.enums import EntityContext, Gender
from src.battle_template.showdown.parser import ShowdownParser

GARCHOMP = 445
FOCUS_SASH = 275


def test_species_with_item(parser):
    template = parser.parse("Garchomp @ Focus Sash")

    assert template.species == GARCHOMP
    assert template.held_item == FOCUS_SASH
    assert template.invalid_lines == []


def test_nickname_gender_and_item(parser):
    template = parser.parse("Chompy (Garchomp) (F) @ Focus Sash")

    assert template.nickname == "Chompy"
    assert template.species == GARCHOMP
    assert template.gender == Gender.FEMALE
    assert template.held_item == FOCUS_SASH


def test_species_only_gender(parser):
    template = parser.parse("Garchomp (M)")

    assert template.species == GARCHOMP
    assert template.gender == Gender.MALE
    assert template.nickname == ""


def test_nickname_in_parentheses_is_swapped_back(parser):
    template = parser.parse("Ditto (Bob) (M)")

    assert template.species == 132
    assert template.nickname == "Bob"
    assert template.gender == Gender.MALE
    assert template.invalid_lines == []


def test_inverted_species_then_nickname(parser):
    template = parser.parse("(Garchomp) Chompy")

    assert template.species == GARCHOMP
    assert template.nickname == "Chompy"


def test_unknown_species(parser):
    template = parser.parse("Xyzzy")

    assert template.species == 0
    assert template.invalid_lines == ["Unknown Species: Xyzzy"]


def test_unknown_item_keeps_species(parser):
    template = parser.parse("Garchomp @ Nonsense")

    assert template.species == GARCHOMP
    assert template.held_item == 0
    assert template.invalid_lines == ["Unknown Item: Nonsense"]


def test_exact_name_beats_hyphen_split(parser):
    assert parser.parse("Porygon-Z").species == 474
    assert parser.parse("Ho-Oh").species == 250


def test_species_with_form(parser):
    template = parser.parse("Vulpix-Alola")

    assert template.species == 37
    assert template.form_name == "Alola"
    assert template.form == 1


def test_form_name_containing_hyphen(parser):
    template = parser.parse("Tauros-Paldea-Combat")

    assert template.species == 128
    assert template.form_name == "Paldea-Combat"
    assert template.form == 1


def test_mega_form_token(parser):
    template = parser.parse("Charizard-Mega-X @ Focus Sash")

    assert template.species == 6
    assert template.form_name == "Mega X"
    assert template.form == 1


def test_gigantamax_suffix(parser):
    template = parser.parse("Charizard-Gmax")

    assert template.species == 6
    assert template.can_gigantamax
    assert template.form_name == ""


def test_nidoran_gender_tokens(parser):
    assert parser.parse("Nidoran-F").species == 29
    assert parser.parse("Nidoran-M").species == 32
    assert parser.parse("Nidoran-F").form_name == ""


def test_dashed_species_with_form(parser):
    template = parser.parse("Kommo-o-Totem")

    assert template.species == 784
    assert template.form_name == "Totem"
    assert template.form == 1


def test_hyphenated_species_outside_dashed_list(strings, forms):
    species = list(strings.species)
    species[5] = "Foo-Bar"
    parser = ShowdownParser(strings.model_copy(update={"species": species}), forms)

    template = parser.parse("Foo-Bar-Baz")

    assert template.species == 5
    assert template.form_name == "Baz"


def test_single_glyph_species_line_is_attempted(strings, forms):
    species = list(strings.species)
    species[32] = "ニ"
    parser = ShowdownParser(strings.model_copy(update={"species": species}), forms)

    assert parser.parse("ニ").species == 32


def test_modern_item_keeps_unpinned_era(parser):
    template = parser.parse("Garchomp @ Leftovers")

    assert template.held_item == 234
    assert template.context == EntityContext.NONE
    assert template.ivs == [31] * 6


def test_gen3_item_name_pins_era(parser):
    template = parser.parse("Garchomp @ BrightPowder")

    assert template.held_item == 179
    assert template.context == EntityContext.GEN3
    assert template.ivs == [31] * 6


def test_gen2_item_name_pins_era_and_dv_defaults(parser):
    template = parser.parse("Garchomp @ Miracleberry")

    assert template.held_item == 146
    assert template.context == EntityContext.GEN2
    assert template.ivs == [15] * 6


def test_gmax_suffix_on_rejected_reading_is_dropped(parser):
    template = parser.parse("Garchomp (Bob-Gmax)")

    assert template.species == GARCHOMP
    assert template.nickname == "Bob-Gmax"
    assert not template.can_gigantamax
