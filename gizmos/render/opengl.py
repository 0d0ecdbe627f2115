"""
GLLineRenderer - draws a LineBatchSink with OpenGL.

One dynamic VBO is refilled per batch; each batch is drawn as GL_LINES with
its own color and alpha. Batches flagged always_on_top are drawn after the
depth-tested ones with the depth test disabled.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from gizmos.render.sink import LineBatch, LineBatchSink


LINE_VERT = """
#version 330 core
layout(location = 0) in vec3 a_position;

uniform mat4 u_view;
uniform mat4 u_projection;

void main() {
    gl_Position = u_projection * u_view * vec4(a_position, 1.0);
}
"""

LINE_FRAG = """
#version 330 core
uniform vec4 u_color;
out vec4 fragColor;

void main() {
    fragColor = u_color;
}
"""


def batch_rgba(batch: "LineBatch") -> tuple[float, float, float, float]:
    """Sink transparency (0 = opaque) -> GL alpha."""
    r, g, b = batch.color
    return (float(r), float(g), float(b), 1.0 - float(batch.transparency))


def split_batches(sink: "LineBatchSink") -> tuple[list["LineBatch"], list["LineBatch"]]:
    """Return (depth_tested, always_on_top) batches preserving order."""
    tested = [b for b in sink.batches if not b.always_on_top]
    on_top = [b for b in sink.batches if b.always_on_top]
    return tested, on_top


class GLLineRenderer:
    """
    Uploads and draws the segments collected in a LineBatchSink.

    Requires a current OpenGL 3.3 core context. GL objects are created on the
    first draw() and freed by release().
    """

    def __init__(self, line_width: float = 1.0):
        self.line_width = line_width
        self._program: int = 0
        self._vao: int = 0
        self._vbo: int = 0
        self._locations: dict[str, int] = {}
        self._initialized = False

    def _ensure_initialized(self) -> None:
        """Initialize OpenGL resources on first use."""
        if self._initialized:
            return

        from OpenGL import GL as gl
        from OpenGL.GL import shaders

        self._vao = gl.glGenVertexArrays(1)
        self._vbo = gl.glGenBuffers(1)

        # core profile: program validation needs a bound VAO
        gl.glBindVertexArray(self._vao)
        self._program = shaders.compileProgram(
            shaders.compileShader(LINE_VERT, gl.GL_VERTEX_SHADER),
            shaders.compileShader(LINE_FRAG, gl.GL_FRAGMENT_SHADER),
        )
        for name in ("u_view", "u_projection", "u_color"):
            self._locations[name] = gl.glGetUniformLocation(self._program, name)

        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, self._vbo)
        gl.glBufferData(gl.GL_ARRAY_BUFFER, 0, None, gl.GL_DYNAMIC_DRAW)
        gl.glEnableVertexAttribArray(0)
        gl.glVertexAttribPointer(0, 3, gl.GL_FLOAT, gl.GL_FALSE, 0, None)
        gl.glBindVertexArray(0)

        self._initialized = True

    def draw(self, sink: "LineBatchSink", view: np.ndarray, proj: np.ndarray) -> None:
        """Draw all batches of `sink` with the given view / projection."""
        from OpenGL import GL as gl

        self._ensure_initialized()

        gl.glUseProgram(self._program)
        # numpy matrices are row-major, hence transpose=GL_TRUE
        gl.glUniformMatrix4fv(self._locations["u_view"], 1, gl.GL_TRUE, np.asarray(view, dtype=np.float32))
        gl.glUniformMatrix4fv(self._locations["u_projection"], 1, gl.GL_TRUE, np.asarray(proj, dtype=np.float32))

        gl.glEnable(gl.GL_BLEND)
        gl.glBlendFunc(gl.GL_SRC_ALPHA, gl.GL_ONE_MINUS_SRC_ALPHA)
        gl.glLineWidth(self.line_width)
        gl.glBindVertexArray(self._vao)

        tested, on_top = split_batches(sink)
        gl.glEnable(gl.GL_DEPTH_TEST)
        for batch in tested:
            self._draw_batch(batch)
        gl.glDisable(gl.GL_DEPTH_TEST)
        for batch in on_top:
            self._draw_batch(batch)

        gl.glBindVertexArray(0)
        gl.glUseProgram(0)

    def _draw_batch(self, batch: "LineBatch") -> None:
        from OpenGL import GL as gl

        vertices = np.ascontiguousarray(batch.as_array().reshape(-1, 3))
        if len(vertices) == 0:
            return
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, self._vbo)
        gl.glBufferData(gl.GL_ARRAY_BUFFER, vertices.nbytes, vertices, gl.GL_DYNAMIC_DRAW)
        gl.glUniform4f(self._locations["u_color"], *batch_rgba(batch))
        gl.glDrawArrays(gl.GL_LINES, 0, len(vertices))

    def release(self) -> None:
        """Free GL objects. Requires the owning context to be current."""
        if not self._initialized:
            return
        from OpenGL import GL as gl

        gl.glDeleteBuffers(1, [self._vbo])
        gl.glDeleteVertexArrays(1, [self._vao])
        gl.glDeleteProgram(self._program)
        self._vbo = self._vao = self._program = 0
        self._locations.clear()
        self._initialized = False
