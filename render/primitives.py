# render/primitives.py
"""Basic drawing primitives shared across render modules."""
from __future__ import annotations

from typing import Tuple, Dict

import pygame

from render.config import (
    LINE_HEIGHT,
    COLOR_TEXT_WHITE,
    COLOR_TEXT_HIGHLIGHT,
    COLOR_BORDER_LIGHT,
)

Color = Tuple[int, int, int]

# Rendered text surfaces keyed by (font_id, text, color)
_TEXT_CACHE: Dict[Tuple[int, str, Color], pygame.Surface] = {}


def draw_text(surface, font, text: str, pos: Tuple[int, int], color: Color = COLOR_TEXT_WHITE) -> None:
    """Draw text at the given position, using a cache to avoid re-rendering."""
    cache_key = (id(font), text, color)
    if cache_key not in _TEXT_CACHE:
        _TEXT_CACHE[cache_key] = font.render(text, True, color)
    surface.blit(_TEXT_CACHE[cache_key], pos)


def draw_section_header(surface, font, text: str, pos: Tuple[int, int], width: int = 200) -> int:
    """Draw a section header with underline. Returns the y position after the header."""
    x, y = pos
    draw_text(surface, font, text, (x, y), color=COLOR_TEXT_HIGHLIGHT)
    y += LINE_HEIGHT
    pygame.draw.line(surface, COLOR_BORDER_LIGHT, (x, y), (x + width, y), 1)
    return y + 6
