"""Crosshair drawn at the centre of the screen."""

from __future__ import annotations

from itertools import accumulate

import numpy as np

from .shader import Shader

_FLOAT_SIZE = np.dtype(np.float32).itemsize


def _gl():
    from pyglet import gl

    return gl


def _buffer_layout(vertices, components):
    """Return (stride in bytes, vertex count, attribute byte offsets)."""
    components = tuple(components)
    if not components or any(size <= 0 for size in components):
        raise ValueError("every attribute needs a positive component count")
    floats_per_vertex = sum(components)
    if len(vertices) % floats_per_vertex:
        raise ValueError(
            f"{len(vertices)} floats do not divide into vertices of {floats_per_vertex}"
        )
    offsets = tuple(
        accumulate((size * _FLOAT_SIZE for size in components[:-1]), initial=0)
    )
    return floats_per_vertex * _FLOAT_SIZE, len(vertices) // floats_per_vertex, offsets


def _create_vertex_array(gl, vertices, components):
    """Upload interleaved float vertices; return (vao, vbo, vertex count)."""
    stride, count, offsets = _buffer_layout(vertices, components)
    vao = gl.GLuint()
    vbo = gl.GLuint()
    gl.glGenVertexArrays(1, vao)
    gl.glGenBuffers(1, vbo)
    gl.glBindVertexArray(vao)
    gl.glBindBuffer(gl.GL_ARRAY_BUFFER, vbo)

    data = np.asarray(vertices, dtype=np.float32).tobytes()
    gl.glBufferData(gl.GL_ARRAY_BUFFER, len(data), data, gl.GL_STATIC_DRAW)
    for index, (size, offset) in enumerate(zip(components, offsets)):
        gl.glVertexAttribPointer(index, size, gl.GL_FLOAT, gl.GL_FALSE, stride, offset)
        gl.glEnableVertexAttribArray(index)

    gl.glBindBuffer(gl.GL_ARRAY_BUFFER, 0)
    gl.glBindVertexArray(0)
    return vao.value, vbo.value, count


def _delete_vertex_array(gl, vao, vbo):
    gl.glDeleteVertexArrays(1, gl.GLuint(vao))
    gl.glDeleteBuffers(1, gl.GLuint(vbo))


class Cursor:
    """A white cross of two short lines, drawn over the scene."""

    VERTEX_SOURCE = """
    #version 330 core
    layout (location = 0) in vec2 aPos;
    void main() {
        gl_Position = vec4(aPos, 0.0, 1.0);
    }
"""

    FRAGMENT_SOURCE = """
    #version 330 core
    out vec4 FragColor;
    void main() {
        FragColor = vec4(1.0, 1.0, 1.0, 1.0);
    }
"""

    VERTICES = (
        -0.01, 0.0,
        0.01, 0.0,
        0.0, -0.01,
        0.0, 0.01,
    )

    def __init__(self):
        self._gl = _gl()
        self._shader = Shader(self.VERTEX_SOURCE, self.FRAGMENT_SOURCE)
        self._vao, self._vbo, self._count = _create_vertex_array(
            self._gl, self.VERTICES, (2,)
        )

    def render(self) -> None:
        """Draw the crosshair on top of everything else."""
        gl = self._gl
        gl.glDisable(gl.GL_DEPTH_TEST)
        self._shader.use()
        gl.glBindVertexArray(self._vao)
        gl.glDrawArrays(gl.GL_LINES, 0, self._count)
        gl.glBindVertexArray(0)
        gl.glEnable(gl.GL_DEPTH_TEST)

    def delete(self) -> None:
        """Release GL objects; calling it again does nothing."""
        if self._vao:
            _delete_vertex_array(self._gl, self._vao, self._vbo)
            self._vao = self._vbo = 0
        self._shader.delete()