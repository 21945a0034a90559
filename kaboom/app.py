"""The game window: a textured platform, a free camera and a crosshair."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Mapping

import numpy as np

from .camera import Camera, Movement, perspective
from .cursor import Cursor, _create_vertex_array, _delete_vertex_array
from .shader import Shader, ShaderError
from .texture import TextureError, load_texture

CAPTION = "Kaboom Battle"
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
DEFAULT_TEXTURE_PATH = "src/textures/grass.png"
CLEAR_COLOR = (0.2, 0.3, 0.3, 1.0)

# Key symbols as reported by the windowing layer.
KEY_ESCAPE = 0xFF1B
KEY_BINDINGS = {
    ord("w"): Movement.FORWARD,
    ord("s"): Movement.BACKWARD,
    ord("a"): Movement.LEFT,
    ord("d"): Movement.RIGHT,
    ord(" "): Movement.UP,
    0xFFE1: Movement.DOWN,
}

VERTEX_SOURCE = """
    #version 330 core
    layout (location = 0) in vec3 aPos;
    layout (location = 1) in vec2 aTexCoord;
    out vec2 TexCoord;
    uniform mat4 model;
    uniform mat4 view;
    uniform mat4 projection;
    void main() {
        gl_Position = projection * view * model * vec4(aPos, 1.0);
        TexCoord = aTexCoord;
    }
    """

FRAGMENT_SOURCE = """
    #version 330 core
    in vec2 TexCoord;
    out vec4 FragColor;
    uniform sampler2D texture1;
    void main() {
        FragColor = texture(texture1, TexCoord);
    }
    """

# x, y, z, u, v
PLATFORM_VERTICES = (
    -10.0, 0.0, -10.0, 0.0, 0.0,
    10.0, 0.0, -10.0, 1.0, 0.0,
    10.0, 0.0, 10.0, 1.0, 1.0,
    -10.0, 0.0, -10.0, 0.0, 0.0,
    10.0, 0.0, 10.0, 1.0, 1.0,
    -10.0, 0.0, 10.0, 0.0, 1.0,
)


def movements_from_keys(keys: Mapping) -> frozenset:
    """Return the movements whose keys are held in a key-state mapping."""
    return frozenset(
        movement for symbol, movement in KEY_BINDINGS.items() if keys.get(symbol, False)
    )


class GameWindow:
    """Owns the window, the scene's GL resources and the per-frame logic."""

    def __init__(self, texture_path):
        import pyglet
        from pyglet import gl
        from pyglet.window import key

        self._pyglet = pyglet
        self._gl = gl
        config = gl.Config(
            major_version=3,
            minor_version=3,
            forward_compatible=True,
            double_buffer=True,
            depth_size=24,
        )
        self.window = pyglet.window.Window(
            WINDOW_WIDTH, WINDOW_HEIGHT, caption=CAPTION, config=config
        )
        screen = self.window.screen
        self.window.set_location(
            (screen.width - WINDOW_WIDTH) // 2, (screen.height - WINDOW_HEIGHT) // 2
        )

        gl.glEnable(gl.GL_DEPTH_TEST)
        self.window.set_exclusive_mouse(True)

        self.camera = Camera()
        self.cursor = Cursor()
        self.shader = Shader(VERTEX_SOURCE, FRAGMENT_SOURCE)
        self._vao, self._vbo, self._count = _create_vertex_array(
            gl, PLATFORM_VERTICES, (3, 2)
        )
        try:
            self.texture = load_texture(texture_path)
        except TextureError as exc:
            print(exc, file=sys.stderr)
            self.texture = 0

        self._projection = perspective(
            45.0, WINDOW_WIDTH / WINDOW_HEIGHT, 0.1, 100.0
        )
        self._closed = False
        self.keys = key.KeyStateHandler()
        self.window.push_handlers(self.keys)
        self.window.push_handlers(self)
        pyglet.clock.schedule(self.update)

    def on_mouse_motion(self, x, y, dx, dy):
        # The window's y axis points up; the camera expects screen-style motion.
        self.camera.look(dx, -dy)

    def on_key_press(self, symbol, modifiers):
        if symbol == KEY_ESCAPE:
            self.window.dispatch_event("on_close")
            return True
        return None

    def update(self, delta_time):
        """Advance the camera by the movement keys held for ``delta_time``."""
        self.camera.move(movements_from_keys(self.keys), delta_time)

    def on_draw(self):
        gl = self._gl
        gl.glClearColor(*CLEAR_COLOR)
        self.window.clear()

        self.shader.use()
        gl.glActiveTexture(gl.GL_TEXTURE0)
        gl.glBindTexture(gl.GL_TEXTURE_2D, self.texture)
        self.shader.set_uniform("texture1", 0)
        self.shader.set_uniform("projection", self._projection)
        self.shader.set_uniform("view", self.camera.view_matrix())
        self.shader.set_uniform("model", np.identity(4))

        gl.glBindVertexArray(self._vao)
        gl.glDrawArrays(gl.GL_TRIANGLES, 0, self._count)
        gl.glBindVertexArray(0)

        self.cursor.render()

    def on_close(self):
        if self._closed:
            return None
        self._closed = True
        gl = self._gl
        self._pyglet.clock.unschedule(self.update)
        _delete_vertex_array(gl, self._vao, self._vbo)
        if self.texture:
            gl.glDeleteTextures(1, gl.GLuint(self.texture))
        self.cursor.delete()
        self.shader.delete()
        return None


def main(argv=None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="kaboom", description="Walk around a platform.")
    parser.add_argument(
        "--texture",
        default=DEFAULT_TEXTURE_PATH,
        help="image used for the platform (default: %(default)s)",
    )
    args = parser.parse_args(argv)

    try:
        import pyglet.app
        import pyglet.window
        from pyglet.gl import ContextException
    except ImportError as exc:
        print(f"Video initialization failed: {exc}", file=sys.stderr)
        return 1

    try:
        GameWindow(args.texture)
    except (pyglet.window.NoSuchConfigException, ContextException) as exc:
        print(f"Window creation failed: {exc}", file=sys.stderr)
        return 1
    except ShaderError as exc:
        print(exc, file=sys.stderr)
        return 1

    pyglet.app.run()
    return 0