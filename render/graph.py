# render/graph.py
"""Weather history line graph.

The graph is drawn into a numpy RGB buffer indexed (x, y) like
pygame.surfarray, with y = 0 at the top. Weather levels are placed at fixed
rows measured from the bottom edge, consecutive days are joined with
Bresenham lines, and each line pixel is stamped as a square of the configured
thickness. The result is saved as a PNG and loaded back for display.
"""
from __future__ import annotations

import os
import sys
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np
import pygame

from render.config import (
    GRAPH_WIDTH,
    GRAPH_HEIGHT,
    GRAPH_BG_COLOR,
    GRAPH_LINE_COLOR,
    GRAPH_LINE_THICKNESS,
    GRAPH_LEVEL_ROWS,
)
from world.states import WeatherState

Color = Tuple[int, int, int]
Point = Tuple[int, int]

WEATHER_LEVELS: Dict[WeatherState, int] = {
    WeatherState.RAINY: 0,
    WeatherState.CLOUDY: 1,
    WeatherState.SUNNY: 2,
}


def encode_history(history: Sequence[WeatherState]) -> np.ndarray:
    """Numeric weather levels (Rainy=0, Cloudy=1, Sunny=2)."""
    return np.array([WEATHER_LEVELS[w] for w in history], dtype=np.int32)


def graph_points(levels: np.ndarray, width: int = GRAPH_WIDTH, height: int = GRAPH_HEIGHT) -> List[Point]:
    """Pixel coordinates (top-down) of each day's data point.

    Days are spread evenly across the full width, so the last point sits on
    x == width and is clipped when drawn.
    """
    rows = np.asarray(GRAPH_LEVEL_ROWS)[levels]
    n = len(levels)
    if n == 1:
        xs = np.zeros(1, dtype=np.int64)
    else:
        xs = np.arange(n) * width // max(1, n - 1)
    ys = (height - 1) - rows
    return [(int(x), int(y)) for x, y in zip(xs, ys)]


def draw_thick_pixel(pixels: np.ndarray, x: int, y: int, color: Color,
                     thickness: int = GRAPH_LINE_THICKNESS) -> None:
    """Fill a thickness-sized square centred on (x, y), clipped to the buffer."""
    half = thickness // 2
    w, h = pixels.shape[:2]
    x0, x1 = max(0, x - half), min(w, x + half + 1)
    y0, y1 = max(0, y - half), min(h, y + half + 1)
    if x0 < x1 and y0 < y1:
        pixels[x0:x1, y0:y1] = color


def draw_line(pixels: np.ndarray, start: Point, end: Point, color: Color,
              thickness: int = GRAPH_LINE_THICKNESS) -> None:
    """Bresenham line between two points, stamping a thick pixel at each step."""
    x0, y0 = start
    x1, y1 = end
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx - dy

    while True:
        draw_thick_pixel(pixels, x0, y0, color, thickness)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x0 += sx
        if e2 < dx:
            err += dx
            y0 += sy


def render_graph_pixels(
    history: Sequence[WeatherState],
    width: int = GRAPH_WIDTH,
    height: int = GRAPH_HEIGHT,
    background: Color = GRAPH_BG_COLOR,
    line_color: Color = GRAPH_LINE_COLOR,
    thickness: int = GRAPH_LINE_THICKNESS,
) -> np.ndarray:
    """RGB buffer of shape (width, height, 3) with the history plotted."""
    pixels = np.empty((width, height, 3), dtype=np.uint8)
    pixels[:, :] = background

    if not history:
        return pixels

    points = graph_points(encode_history(history), width, height)
    if len(points) == 1:
        draw_thick_pixel(pixels, points[0][0], points[0][1], line_color, thickness)
    for start, end in zip(points, points[1:]):
        draw_line(pixels, start, end, line_color, thickness)
    return pixels


def history_graph_surface(history: Sequence[WeatherState]) -> pygame.Surface:
    return pygame.surfarray.make_surface(render_graph_pixels(history))


def save_history_graph(history: Sequence[WeatherState], path: str) -> str:
    """Write the history graph as a PNG, creating the folder if needed."""
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)
    pygame.image.save(history_graph_surface(history), path)
    return path


def load_graph_image(path: str) -> Optional[pygame.Surface]:
    """Load a saved graph for display. Returns None if it cannot be read."""
    try:
        return pygame.image.load(path)
    except (FileNotFoundError, pygame.error) as e:
        print(f"Failed to load image: {e}", file=sys.stderr)
        return None
