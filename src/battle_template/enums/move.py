from enum import IntEnum


class Move(IntEnum):
    """Move IDs the text format treats specially"""

    NONE = 0
    HIDDEN_POWER = 237
