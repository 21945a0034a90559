"""Compiled and linked GLSL programs."""

from __future__ import annotations

import numpy as np


class ShaderError(RuntimeError):
    """A shader failed to compile or a program failed to link."""

    def __init__(self, stage: str, log: str):
        super().__init__(f"Shader {stage} failed: {log}")
        self.stage = stage
        self.log = log


def _shader_api():
    from pyglet.graphics import shader

    return shader


def _decode_log(raw: bytes) -> str:
    """Turn a NUL-terminated info log buffer into text."""
    return raw.split(b"\0", 1)[0].decode("utf-8", "replace").strip()


def _uniform_function(value) -> str:
    """Name the GL call that uploads ``value`` as a uniform."""
    if isinstance(value, (bool, int, np.integer)):
        return "glUniform1i"
    if isinstance(value, (float, np.floating)):
        return "glUniform1f"
    if isinstance(value, (list, tuple, np.ndarray)) and np.shape(value) == (4, 4):
        return "glUniformMatrix4fv"
    raise TypeError(f"unsupported uniform value: {value!r}")


def _matrix_floats(matrix) -> tuple:
    """Return a 4x4 matrix as 16 floats in column-major order."""
    values = np.asarray(matrix, dtype=np.float32)
    if values.shape != (4, 4):
        raise ValueError(f"expected a 4x4 matrix, got shape {values.shape}")
    return tuple(float(v) for v in values.flatten(order="F"))


class Shader:
    """A GLSL program built from a vertex and a fragment shader."""

    def __init__(self, vertex_source, fragment_source):
        api = _shader_api()
        try:
            vertex = api.Shader(vertex_source, "vertex")
            fragment = api.Shader(fragment_source, "fragment")
        except api.ShaderException as exc:
            raise ShaderError("compilation", str(exc)) from exc
        try:
            program = api.ShaderProgram(vertex, fragment)
        except api.ShaderException as exc:
            raise ShaderError("linking", str(exc)) from exc
        finally:
            vertex.delete()
            fragment.delete()
        self._program = program
        self.program = program.id

    def use(self) -> None:
        """Make this program current."""
        self._program.use()

    def set_uniform(self, name, value) -> None:
        """Upload an int, float or 4x4 matrix to the named uniform."""
        function = _uniform_function(value)
        if function == "glUniformMatrix4fv":
            self._program[name] = _matrix_floats(value)
        elif function == "glUniform1f":
            self._program[name] = float(value)
        else:
            self._program[name] = int(value)

    def delete(self) -> None:
        """Release the program; calling it again does nothing."""
        if self.program:
            self._program.delete()
            self.program = 0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.delete()