from enum import IntEnum


class Gender(IntEnum):
    """Gender marker carried on the first line: (M), (F) or nothing"""

    MALE = 0
    FEMALE = 1
    UNSPECIFIED = 2

    @property
    def suffix(self) -> str:
        if self is Gender.MALE:
            return " (M)"
        if self is Gender.FEMALE:
            return " (F)"
        return ""

    @classmethod
    def from_value(cls, value: int) -> "Gender":
        """Genderless and unknown values collapse to UNSPECIFIED"""
        if value in (0, 1):
            return cls(value)
        return cls.UNSPECIFIED


class Type(IntEnum):
    """Elemental types, positional order of the type name table.

    ANY is the sentinel for "no Tera Type chosen".
    """

    ANY = -1
    NORMAL = 0
    FIGHTING = 1
    FLYING = 2
    POISON = 3
    GROUND = 4
    ROCK = 5
    BUG = 6
    GHOST = 7
    STEEL = 8
    FIRE = 9
    WATER = 10
    GRASS = 11
    ELECTRIC = 12
    PSYCHIC = 13
    ICE = 14
    DRAGON = 15
    DARK = 16
    FAIRY = 17
    STELLAR = 18
