"""
Team text: several sets separated by blank lines, optionally under "=== [format] Name ===" headers
"""

import os
from typing import Iterable

from src.battle_template.config import ParserSettings
from src.battle_template.constants import TEAM_HEADER_PREFIX
from src.battle_template.data.forms import FormResolver
from src.battle_template.data.game_strings import GameStrings
from src.battle_template.schema.battle_template import BattleTemplate
from src.battle_template.showdown.generator import get_template_text
from src.battle_template.showdown.parser import ShowdownParser


def split_set_blocks(text: str) -> list[list[str]]:
    """Group lines into per-set blocks, dropping blank lines and team headers"""
    blocks: list[list[str]] = []
    current: list[str] = []
    for line in text.splitlines():
        trimmed = line.strip()
        if not trimmed or trimmed.startswith(TEAM_HEADER_PREFIX):
            if current:
                blocks.append(current)
                current = []
            continue
        current.append(line)
    if current:
        blocks.append(current)
    return blocks


def parse_sets(text: str, strings: GameStrings | None = None, forms: FormResolver | None = None, settings: ParserSettings | None = None) -> list[BattleTemplate]:
    parser = ShowdownParser(strings, forms, settings)
    return [parser.parse_lines(block) for block in split_set_blocks(text)]


def get_sets_text(templates: Iterable[BattleTemplate], strings: GameStrings | None = None, forms: FormResolver | None = None) -> str:
    """Join each template's text with one blank line; templates without text are skipped"""
    texts = [get_template_text(template, strings, forms) for template in templates]
    return (os.linesep * 2).join(text for text in texts if text)
