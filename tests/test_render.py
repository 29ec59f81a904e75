"""Tests for skeleton rendering and pose-cue export."""

import io

import pytest
from PIL import Image, ImageDraw

from posetransfer.models import DESIGN_HEIGHT, DESIGN_WIDTH, JointId, PoseGraph, ViewportTransform
from posetransfer.pipeline import Surface, export_data_url, export_png, render_export, render_icon
from posetransfer.pipeline.render import (
    HIGHLIGHT_COLOUR,
    JOINT_COLOUR,
    render_interactive,
    stroke_segment,
)
from posetransfer.poses import all_presets

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


class TestExport:
    def test_size_and_mode(self, standing):
        img = render_export(standing)
        assert img.size == (DESIGN_WIDTH, DESIGN_HEIGHT)
        assert img.mode == "RGB"

    def test_background_white_and_figure_black(self, standing):
        img = render_export(standing)
        assert img.getpixel((0, 0)) == WHITE
        # Midpoint of the neck-to-hip limb.
        assert img.getpixel((128, 100)) == BLACK
        assert BLACK in {c for _, c in img.getcolors(maxcolors=1 << 16)}

    def test_no_joint_markers(self, standing):
        img = render_export(standing)
        # l_foot sits at (112, 230); a joint marker would cover 9 px to its side.
        assert img.getpixel((120, 230)) == WHITE
        assert img.getpixel((104, 230)) == WHITE

    def test_head_is_a_ring(self, standing):
        img = render_export(standing)
        assert img.getpixel((128, 40)) == WHITE  # hollow centre
        assert img.getpixel((128 + 15, 40)) == BLACK
        assert img.getpixel((128 - 15, 40)) == BLACK

    @pytest.mark.parametrize("preset", all_presets(), ids=lambda p: p.name)
    def test_export_is_deterministic(self, preset):
        graph = preset.to_graph()
        assert export_png(graph) == export_png(graph)

    def test_export_does_not_touch_graph(self, standing):
        before = standing.model_dump()
        export_png(standing)
        assert standing.model_dump() == before

    def test_export_png_decodes(self, standing):
        img = Image.open(io.BytesIO(export_png(standing)))
        assert img.format == "PNG"
        assert img.size == (DESIGN_WIDTH, DESIGN_HEIGHT)

    def test_data_url_prefix(self, standing):
        assert export_data_url(standing).startswith("data:image/png;base64,")

    def test_different_poses_differ(self):
        standing, waving = (p.to_graph() for p in all_presets()[:2])
        assert export_png(standing) != export_png(waving)


class TestInteractive:
    def test_highlighted_joint_uses_highlight_colour(self):
        graph = PoseGraph()
        surface = Surface(256, 280)
        transform = ViewportTransform.recompute(256, 280)
        render_interactive(surface, graph, transform, highlight=JointId.L_FOOT)

        foot = transform.to_screen((graph.get("l_foot").x, graph.get("l_foot").y))
        r_foot = transform.to_screen((graph.get("r_foot").x, graph.get("r_foot").y))
        assert surface.image.getpixel(tuple(round(v) for v in foot)) == HIGHLIGHT_COLOUR
        assert surface.image.getpixel(tuple(round(v) for v in r_foot)) == JOINT_COLOUR

    def test_background_stays_transparent(self):
        surface = Surface(256, 280)
        render_interactive(surface, PoseGraph(), ViewportTransform.recompute(256, 280))
        assert surface.image.getpixel((2, 2)) == (0, 0, 0, 0)

    def test_redraw_clears_previous_frame(self):
        graph = PoseGraph()
        surface = Surface(256, 280)
        transform = ViewportTransform.recompute(256, 280)
        render_interactive(surface, graph, transform)
        old = transform.to_screen((graph.get("l_hand").x, graph.get("l_hand").y))

        graph.set_position("l_hand", 250, 20)
        render_interactive(surface, graph, transform)
        assert surface.image.getpixel(tuple(round(v) for v in old))[3] == 0


class TestSurface:
    def test_pixel_ratio_scales_backing_store(self):
        surface = Surface(100, 50, device_pixel_ratio=2.0)
        assert surface.pixel_size == (200, 100)
        assert surface.image.size == (200, 100)

    def test_resize(self):
        surface = Surface(100, 50)
        surface.resize(30, 40, 1.5)
        assert surface.image.size == (45, 60)
        assert surface.device_pixel_ratio == 1.5

    @pytest.mark.parametrize("args", [(0, 10), (10, -1), (10, 10, 0)])
    def test_resize_rejects_invalid(self, args):
        with pytest.raises(ValueError):
            Surface(10, 10).resize(*args)

    def test_interactive_at_double_density(self):
        graph = PoseGraph()
        surface = Surface(256, 280, device_pixel_ratio=2.0)
        transform = ViewportTransform.recompute(256, 280)
        render_interactive(surface, graph, transform, highlight=JointId.R_HAND)
        x, y = transform.to_screen((graph.get("r_hand").x, graph.get("r_hand").y))
        assert surface.image.getpixel((round(x * 2), round(y * 2))) == HIGHLIGHT_COLOUR


def test_render_icon(standing):
    icon = render_icon(standing, 48)
    assert icon.size == (48, 48)
    assert icon.getpixel((0, 0)) == WHITE
    assert len(icon.getcolors(maxcolors=1 << 16)) > 1


def test_stroke_segment_has_round_caps():
    img = Image.new("L", (40, 20), 0)
    stroke_segment(ImageDraw.Draw(img), (10, 10), (30, 10), 6, 255)
    assert img.getpixel((20, 10)) == 255
    # The cap reaches past the end point by half the width.
    assert img.getpixel((8, 10)) == 255
    assert img.getpixel((32, 10)) == 255
    assert img.getpixel((2, 10)) == 0
