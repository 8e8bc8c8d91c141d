from unittest.mock import MagicMock

import numpy as np
import pytest
from frameui.core.math2d import AffineTransform
from frameui.render.batch import BatchBackend, DrawBatch, MonospaceFont, triangle_vertices
from frameui.render.renderer import TriangleRenderer
from frameui.ui.backend import GlyphInfos


def test_triangle_vertices():
    uv = ((0.0, 1.0), (0.0, 0.0), (1.0, 1.0))
    vertices = triangle_vertices(AffineTransform.scale(0.5), uv)

    assert vertices.dtype == np.float32
    assert vertices.shape == (3, 4)
    assert vertices.tolist() == [
        [-0.5, 0.5, 0.0, 1.0],
        [-0.5, -0.5, 0.0, 0.0],
        [0.5, 0.5, 1.0, 1.0],
    ]


def test_backend_records_in_order():
    backend = BatchBackend({"a": 1.0, "b": 2.0}, {"mono": MonospaceFont()})
    backend.draw_image("a", AffineTransform.identity())
    backend.draw_glyph("mono", "x", AffineTransform.identity())
    backend.draw_image("b", AffineTransform.identity())

    batch = backend.batch
    assert batch.triangle_count == 4
    assert batch.glyph_count == 1
    assert batch.total_vertices == 12
    assert batch.resources() == ["a", "b"]
    assert [t.z_index for t in batch.triangles] == [0, 1, 3, 4]
    assert batch.glyphs[0].z_index == 2

    assert batch.vertices_for("a").shape == (6, 4)
    assert batch.vertices_for("missing").shape == (0, 4)

    backend.clear()
    assert batch.triangle_count == 0 and batch.glyph_count == 0
    backend.draw_image("a", AffineTransform.identity())
    assert batch.triangles[0].z_index == 0


def test_backend_metrics():
    font = MonospaceFont(glyph_width=0.4, glyph_height=0.8, advance=0.6, line_height=1.1,
                         kerning={("T", "o"): -0.08})
    backend = BatchBackend({"logo": 2.5}, {"body": font})

    assert backend.get_image_width_per_height("logo") == 2.5
    assert backend.line_height("body") == 1.1
    assert backend.kerning("body", "T", "o") == -0.08
    assert backend.kerning("body", "o", "T") == 0.0
    assert backend.glyph_infos("body", "g") == GlyphInfos(
        width=0.4, height=0.8, x_offset=pytest.approx(0.1), y_offset=0.8, x_advance=0.6,
    )

    with pytest.raises(KeyError):
        backend.get_image_width_per_height("nope")
    with pytest.raises(KeyError):
        backend.line_height("nope")


def test_font_is_hashable():
    assert hash(MonospaceFont()) == hash(MonospaceFont(kerning={("A", "V"): -0.1}))


def test_renderer_draws_one_call_per_texture():
    ctx = MagicMock()
    textures = {"a": MagicMock(), "b": MagicMock()}
    renderer = TriangleRenderer(ctx, textures)

    batch = DrawBatch()
    backend = BatchBackend({"a": 1.0, "b": 1.0})
    backend.batch = batch
    backend.draw_image("a", AffineTransform.identity())
    backend.draw_image("b", AffineTransform.scale(0.5))
    backend.draw_image("a", AffineTransform.scale(0.25))

    renderer.render(batch)

    ctx.program.assert_called_once()
    textures["a"].use.assert_called_once_with(location=0)
    textures["b"].use.assert_called_once_with(location=0)

    vao = ctx.vertex_array.return_value
    assert [c.kwargs["vertices"] for c in vao.render.call_args_list] == [12, 6]


def test_renderer_skips_unknown_textures():
    ctx = MagicMock()
    renderer = TriangleRenderer(ctx)

    batch = DrawBatch()
    backend = BatchBackend({"a": 1.0})
    backend.batch = batch
    backend.draw_image("a", AffineTransform.identity())

    renderer.render(batch)
    ctx.vertex_array.return_value.render.assert_not_called()

    renderer.register_texture("a", MagicMock())
    renderer.render(batch)
    ctx.vertex_array.return_value.render.assert_called_once()

    renderer.release()
    ctx.program.return_value.release.assert_called_once()


def test_renderer_grows_buffer():
    ctx = MagicMock()
    renderer = TriangleRenderer(ctx, {"a": MagicMock()})

    batch = DrawBatch()
    backend = BatchBackend({"a": 1.0})
    backend.batch = batch
    for _ in range(100):
        backend.draw_image("a", AffineTransform.identity())

    renderer.render(batch)
    renderer.render(batch)
    # 600 vertices, reserved once
    ctx.buffer.assert_called_once_with(reserve=600 * 16, dynamic=True)
