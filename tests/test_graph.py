"""
Tests for the weather history graph.

Rendering runs headless (SDL dummy driver, see conftest.py).
"""
import numpy as np
import pygame
import pytest

from render.graph import (
    encode_history,
    graph_points,
    draw_thick_pixel,
    draw_line,
    render_graph_pixels,
    save_history_graph,
    load_graph_image,
)
from render.config import GRAPH_BG_COLOR, GRAPH_LINE_COLOR
from world.states import WeatherState

S, C, R = WeatherState.SUNNY, WeatherState.CLOUDY, WeatherState.RAINY
BLUE = np.array(GRAPH_LINE_COLOR, dtype=np.uint8)
WHITE = np.array(GRAPH_BG_COLOR, dtype=np.uint8)


class TestEncoding:

    def test_levels(self):
        assert encode_history([R, C, S, C]).tolist() == [0, 1, 2, 1]

    def test_points_span_width_bottom_up(self):
        points = graph_points(encode_history([R, C, S]), width=512, height=256)
        assert points == [(0, 205), (256, 127), (512, 49)]

    def test_single_point(self):
        assert graph_points(encode_history([S]), width=512, height=256) == [(0, 49)]


class TestDrawing:

    def test_thick_pixel_square(self):
        pixels = np.zeros((10, 10, 3), dtype=np.uint8)
        draw_thick_pixel(pixels, 5, 5, (1, 2, 3), thickness=3)
        painted = np.argwhere(pixels[:, :, 0] == 1)
        assert painted.min(axis=0).tolist() == [4, 4]
        assert painted.max(axis=0).tolist() == [6, 6]
        assert len(painted) == 9

    def test_thick_pixel_clipped(self):
        pixels = np.zeros((4, 4, 3), dtype=np.uint8)
        draw_thick_pixel(pixels, 0, 0, (9, 9, 9), thickness=3)
        assert (pixels[:, :, 0] == 9).sum() == 4
        draw_thick_pixel(pixels, 10, 10, (7, 7, 7), thickness=3)
        assert not (pixels == 7).any()

    def test_horizontal_line(self):
        pixels = np.zeros((10, 10, 3), dtype=np.uint8)
        draw_line(pixels, (1, 5), (8, 5), (255, 0, 0), thickness=1)
        row = pixels[:, 5, 0]
        assert row[1:9].tolist() == [255] * 8
        assert row[0] == 0 and row[9] == 0
        assert (pixels[:, :, 0] > 0).sum() == 8

    def test_diagonal_line_reaches_both_ends(self):
        pixels = np.zeros((10, 10, 3), dtype=np.uint8)
        draw_line(pixels, (8, 1), (1, 8), (255, 0, 0), thickness=1)
        assert pixels[8, 1, 0] == 255
        assert pixels[1, 8, 0] == 255
        assert (pixels[:, :, 0] > 0).sum() == 8


class TestRenderGraph:

    def test_blank_history(self):
        pixels = render_graph_pixels([])
        assert pixels.shape == (512, 256, 3)
        assert (pixels == WHITE).all()

    def test_line_on_background(self):
        pixels = render_graph_pixels([R, C, S])
        assert (pixels[0, 205] == BLUE).all()
        assert (pixels[256, 127] == BLUE).all()
        assert (pixels[511, 50] == BLUE).all()
        assert (pixels[300, 10] == WHITE).all()
        assert (pixels[0, 0] == WHITE).all()

    def test_single_day(self):
        pixels = render_graph_pixels([C])
        assert (pixels[0, 127] == BLUE).all()
        assert (pixels[1, 128] == BLUE).all()
        assert (pixels[2, 127] == WHITE).all()


class TestGraphFiles:

    def test_save_and_load(self, tmp_path):
        path = str(tmp_path / "nested" / "Graph.png")
        assert save_history_graph([S, S, C, R, R, C, S], path) == path

        image = load_graph_image(path)
        assert image is not None
        assert image.get_size() == (512, 256)
        assert tuple(image.get_at((0, 0)))[:3] == GRAPH_BG_COLOR

    def test_missing_file(self, tmp_path, capsys):
        assert load_graph_image(str(tmp_path / "missing.png")) is None
        assert "Failed to load image" in capsys.readouterr().err

    def test_unwritable_target(self, tmp_path):
        blocker = tmp_path / "GraphImages"
        blocker.write_text("not a directory")
        with pytest.raises((OSError, pygame.error)):
            save_history_graph([S, C], str(blocker / "Graph.png"))
