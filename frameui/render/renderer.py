"""
Triangle Renderer

Renders the triangles of a DrawBatch with moderngl.

Positions coming out of the layout core are already in viewport NDC, so the
vertex shader is a pass-through. One draw call per texture.
"""

from __future__ import annotations
from typing import Dict, Hashable, Optional, TYPE_CHECKING
import logging

if TYPE_CHECKING:
    import moderngl
    from frameui.render.batch import DrawBatch

logger = logging.getLogger(__name__)


class TriangleRenderer:
    """
    Standalone renderer for recorded UI triangles.

    Usage:
        renderer = TriangleRenderer(ctx, {"button": ctx.texture(...)})

        # Each frame:
        backend.clear()
        build_ui(session.begin_frame(w, h, backend, ...))
        renderer.render(backend.batch)
    """

    def __init__(self, ctx: 'moderngl.Context',
                 textures: Optional[Dict[Hashable, 'moderngl.Texture']] = None):
        self.ctx = ctx
        self.textures: Dict[Hashable, 'moderngl.Texture'] = dict(textures or {})

        self._prog = None
        self._vbo = None
        self._vao = None
        self._capacity = 0

        self._initialized = False

    def _ensure_initialized(self):
        """Create GPU resources on first use."""
        if self._initialized:
            return

        self._prog = self.ctx.program(
            vertex_shader="""
            #version 330
            in vec2 in_pos;
            in vec2 in_uv;
            out vec2 v_uv;

            void main() {
                gl_Position = vec4(in_pos, 0.0, 1.0);
                v_uv = in_uv;
            }
            """,
            fragment_shader="""
            #version 330
            in vec2 v_uv;
            out vec4 frag_color;

            uniform sampler2D u_texture;

            void main() {
                frag_color = texture(u_texture, v_uv);
            }
            """
        )

        self._initialized = True

    def _ensure_buffer(self, vertex_count: int):
        """Ensure the VBO can hold vertex_count vertices."""
        if self._capacity >= vertex_count and self._vbo is not None:
            return

        new_capacity = max(vertex_count, self._capacity * 2, 256)
        byte_size = new_capacity * 16  # 4 floats * 4 bytes

        if self._vbo:
            self._vbo.release()

        self._vbo = self.ctx.buffer(reserve=byte_size, dynamic=True)
        self._capacity = new_capacity

        self._vao = self.ctx.vertex_array(
            self._prog,
            [(self._vbo, "2f 2f", "in_pos", "in_uv")],
        )

    def register_texture(self, resource: Hashable, texture: 'moderngl.Texture'):
        self.textures[resource] = texture

    def render(self, batch: 'DrawBatch'):
        """
        Draw every triangle of the batch, grouped by texture.

        Call after the 3D pass, with depth testing disabled and blending on.
        """
        self._ensure_initialized()

        for resource in batch.resources():
            texture: Optional['moderngl.Texture'] = self.textures.get(resource)
            if texture is None:
                logger.warning(f"no texture registered for {resource!r}, skipping")
                continue

            vertices = batch.vertices_for(resource)
            self._ensure_buffer(len(vertices))
            self._vbo.write(vertices.tobytes())

            texture.use(location=0)
            self._prog["u_texture"].value = 0
            self._vao.render(mode=self.ctx.TRIANGLES, vertices=len(vertices))

        # Glyphs need a font atlas, which is the host's business
        if batch.glyphs:
            logger.debug(f"skipping {batch.glyph_count} glyphs (no font atlas)")

    def release(self):
        """Release GPU resources."""
        if self._vbo:
            self._vbo.release()
        if self._vao:
            self._vao.release()
        if self._prog:
            self._prog.release()
