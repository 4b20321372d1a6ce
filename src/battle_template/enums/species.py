from enum import IntEnum


class Species(IntEnum):
    """National dex numbers the text format treats specially"""

    NONE = 0
    NIDORAN_F = 29
    NIDORAN_M = 32
    HO_OH = 250
    MEOWSTIC = 678
    JANGMO_O = 782
    HAKAMO_O = 783
    KOMMO_O = 784
    INDEEDEE = 876
    BASCULEGION = 902
    OINKOLOGNE = 916
    WO_CHIEN = 1001
    CHIEN_PAO = 1002
    TING_LU = 1003
    CHI_YU = 1004


# Display names containing a hyphen (or a gender glyph rendered as "-M"/"-F")
# that must not be split into species and form.
DASHED_SPECIES = (
    Species.NIDORAN_F,
    Species.NIDORAN_M,
    Species.HO_OH,
    Species.JANGMO_O,
    Species.HAKAMO_O,
    Species.KOMMO_O,
    Species.TING_LU,
    Species.CHIEN_PAO,
    Species.WO_CHIEN,
    Species.CHI_YU,
)

# Forms of these species encode gender: form 0 = male, form 1 = female
GENDERED_FORM_SPECIES = (
    Species.MEOWSTIC,
    Species.INDEEDEE,
    Species.BASCULEGION,
    Species.OINKOLOGNE,
)
