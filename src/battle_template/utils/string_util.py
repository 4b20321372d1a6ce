from typing import Sequence


def find_index_ignore_case(names: Sequence[str], value: str) -> int:
    """Return the index of the first name matching value case-insensitively, or -1.

    An empty value never matches (tables use empty strings as placeholders).
    """
    if not value:
        return -1
    folded = value.casefold()
    for index, name in enumerate(names):
        if name.casefold() == folded:
            return index
    return -1


def remove_all(text: str, remove: str) -> str:
    """Drop every character of text that appears in remove"""
    return "".join(c for c in text if c not in remove)
