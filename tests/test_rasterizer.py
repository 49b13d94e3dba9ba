import math

import pytest

from quadgui.geometry import Color, Rect, RectOffset, Vec2
from quadgui.painter import (
    Clip,
    DrawCharacter,
    DrawLine,
    DrawRawTexture,
    DrawRect,
    DrawSprite,
    DrawTriangle,
)
from quadgui.rasterizer import (
    MAX_VERTICES,
    DrawList,
    Vertex,
    render_command,
)

RED = Color(1.0, 0.0, 0.0, 1.0)
SOURCE = Rect(0.0, 0.0, 0.5, 0.5)


def test_rectangle_vertices_and_indices():
    dl = DrawList()
    dl.draw_rectangle(Rect(10.0, 20.0, 30.0, 40.0), SOURCE, RED)
    positions = [v.position[:2] for v in dl.vertices]
    assert positions == [(10.0, 20.0), (40.0, 20.0), (40.0, 60.0), (10.0, 60.0)]
    assert dl.indices == [0, 1, 2, 0, 2, 3]
    assert all(v.color == RED for v in dl.vertices)


def test_second_rectangle_indices_are_offset():
    dl = DrawList()
    dl.draw_rectangle(Rect(0.0, 0.0, 1.0, 1.0), SOURCE, RED)
    dl.draw_rectangle(Rect(0.0, 0.0, 1.0, 1.0), SOURCE, RED)
    assert dl.indices[6:] == [i + 4 for i in dl.indices[:6]]


def test_rectangle_uv_spans_source():
    dl = DrawList()
    src = Rect(0.25, 0.5, 0.25, 0.25)
    dl.draw_rectangle(Rect(0.0, 0.0, 5.0, 5.0), src, RED)
    assert dl.vertices[0].uv == (src.x, src.y)
    assert dl.vertices[2].uv == (src.x + src.w, src.y + src.h)


def test_rectangle_lines_make_four_rectangles():
    dl = DrawList()
    dl.draw_rectangle_lines(Rect(0.0, 0.0, 10.0, 10.0), SOURCE, RED)
    assert len(dl.vertices) == 16
    assert len(dl.indices) == 24
    xs = [v.position[0] for v in dl.vertices]
    assert min(xs) == 0.0 and max(xs) == 10.0


def test_sprite_is_nine_patch():
    dl = DrawList()
    dl.draw_sprite(
        Rect(0.0, 0.0, 20.0, 20.0),
        SOURCE,
        RectOffset(2.0, 2.0, 2.0, 2.0),
        RectOffset(0.1, 0.1, 0.1, 0.1),
        RED,
    )
    assert len(dl.vertices) == 16
    assert len(dl.indices) == 54
    assert set(dl.indices) == set(range(16))
    corners = {v.position[:2] for v in dl.vertices}
    assert (0.0, 0.0) in corners and (20.0, 20.0) in corners


def test_triangle_vertices():
    dl = DrawList()
    points = (Vec2(0.0, 0.0), Vec2(5.0, 0.0), Vec2(0.0, 5.0))
    dl.draw_triangle(*points, SOURCE, RED)
    assert [v.position[:2] for v in dl.vertices] == [(p.x, p.y) for p in points]
    assert dl.indices == [0, 1, 2]


def test_zero_length_line_is_skipped():
    dl = DrawList()
    dl.draw_line(3.0, 3.0, 3.0, 3.0, 1.0, SOURCE, RED)
    assert dl.vertices == [] and dl.indices == []


def test_line_width_matches_thickness():
    dl = DrawList()
    dl.draw_line(0.0, 0.0, 10.0, 7.0, 4.0, SOURCE, RED)
    assert len(dl.vertices) == 4
    assert dl.indices == [0, 1, 2, 2, 1, 3]
    a, b = dl.vertices[0].position, dl.vertices[1].position
    assert math.hypot(a[0] - b[0], a[1] - b[1]) == pytest.approx(4.0)


def test_clear_keeps_texture():
    dl = DrawList(texture="tex")
    dl.draw_rectangle(Rect(0.0, 0.0, 1.0, 1.0), SOURCE, RED)
    dl.clipping_zone = Rect(0.0, 0.0, 5.0, 5.0)
    dl.clear()
    assert dl.vertices == [] and dl.indices == []
    assert dl.clipping_zone is None
    assert dl.texture == "tex"


def test_render_into_empty_list_creates_draw_list():
    lists: list[DrawList] = []
    render_command(lists, DrawCharacter(Rect(0.0, 0.0, 4.0, 4.0), SOURCE, RED))
    assert len(lists) == 1
    assert len(lists[0].vertices) == 4


def test_clip_same_rect_reuses_list():
    zone = Rect(0.0, 0.0, 50.0, 50.0)
    lists: list[DrawList] = []
    render_command(lists, Clip(zone))
    count = len(lists)
    render_command(lists, Clip(Rect(0.0, 0.0, 50.0, 50.0)))
    assert len(lists) == count
    assert lists[-1].clipping_zone == zone


def test_clip_new_rect_starts_new_list():
    lists = [DrawList()]
    zone = Rect(1.0, 1.0, 5.0, 5.0)
    render_command(lists, Clip(zone))
    assert len(lists) == 2
    assert lists[-1].clipping_zone == zone
    render_command(lists, Clip(None))
    assert len(lists) == 3
    assert lists[-1].clipping_zone is None


def test_raw_texture_batches_by_texture():
    lists = [DrawList(clipping_zone=Rect(0.0, 0.0, 9.0, 9.0))]
    render_command(lists, DrawRawTexture(Rect(0.0, 0.0, 2.0, 2.0), "tex-a"))
    render_command(lists, DrawRawTexture(Rect(2.0, 0.0, 2.0, 2.0), "tex-a"))
    assert len(lists) == 2
    assert lists[1].texture == "tex-a"
    assert lists[1].clipping_zone == lists[0].clipping_zone
    assert len(lists[1].vertices) == 8
    assert lists[1].vertices[0].uv == (0.0, 0.0)
    render_command(lists, DrawRawTexture(Rect(0.0, 0.0, 2.0, 2.0), "tex-b"))
    assert len(lists) == 3
    assert lists[2].texture == "tex-b"


def test_shape_after_texture_starts_untextured_list():
    zone = Rect(0.0, 0.0, 9.0, 9.0)
    lists = [DrawList(clipping_zone=zone)]
    render_command(lists, DrawRawTexture(Rect(0.0, 0.0, 2.0, 2.0), "tex"))
    render_command(lists, DrawRect(Rect(0.0, 0.0, 3.0, 3.0), SOURCE, fill=RED))
    assert len(lists) == 3
    assert lists[-1].texture is None
    assert lists[-1].clipping_zone == zone


def test_rect_with_fill_and_stroke():
    lists: list[DrawList] = []
    render_command(
        lists, DrawRect(Rect(0.0, 0.0, 10.0, 10.0), SOURCE, fill=RED, stroke=RED)
    )
    assert len(lists[0].vertices) == 4 + 16


def test_rect_without_colors_draws_nothing():
    lists: list[DrawList] = []
    render_command(lists, DrawRect(Rect(0.0, 0.0, 10.0, 10.0), SOURCE))
    assert lists[0].vertices == []


def test_vertex_budget_overflow_starts_new_list():
    filler = Vertex((0.0, 0.0, 0.0), (0.0, 0.0), RED)
    lists = [DrawList(vertices=[filler] * (MAX_VERTICES - 5))]
    render_command(lists, DrawLine(Vec2(0.0, 0.0), Vec2(5.0, 0.0), SOURCE, RED))
    assert len(lists) == 2
    assert len(lists[1].vertices) == 4


def test_sprite_command_without_offsets():
    lists: list[DrawList] = []
    render_command(lists, DrawSprite(Rect(0.0, 0.0, 8.0, 8.0), SOURCE, RED))
    assert len(lists[0].vertices) == 16
    xs = sorted({v.position[0] for v in lists[0].vertices})
    assert xs == [0.0, 8.0]


def test_triangle_command():
    lists: list[DrawList] = []
    render_command(
        lists,
        DrawTriangle(Vec2(0.0, 0.0), Vec2(1.0, 0.0), Vec2(0.0, 1.0), SOURCE, RED),
    )
    assert len(lists[0].vertices) == 3
    assert all(v.uv == (SOURCE.x, SOURCE.y) for v in lists[0].vertices)


def test_unknown_command_raises():
    with pytest.raises(TypeError):
        render_command([DrawList()], object())