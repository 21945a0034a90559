# kaboom

A small first-person OpenGL scene. It opens an 800×600 window titled
"Kaboom Battle" and shows a 20×20 textured platform, seen through a mouse-look
camera. A white crosshair sits in the centre of the screen.

## Installing

Python 3.10 or later is required.

```
pip install .
```

The tests need the `test` extra:

```
pip install ".[test]"
pytest
```

You need an OpenGL 3.3 context to run the scene.

## Running

```
kaboom
```

The platform texture is read from `src/textures/grass.png`, relative to the
current directory. To use a different image, pass `--texture`:

```
kaboom --texture path/to/grass.png
```

If the image cannot be loaded, a "Failed to load texture" message is printed
and the platform is drawn without a texture. The command exits with status 1
in two cases: the window or GL context cannot be created, or a shader fails to
compile or link.

### Controls

| Input        | Action                                  |
|--------------|-----------------------------------------|
| Mouse        | Look around (pitch clamped to ±89°)     |
| W / S        | Move forward / backward                 |
| A / D        | Strafe left / right                     |
| Space        | Move up                                 |
| Left Shift   | Move down                               |
| Escape       | Close the window                        |

Movement speed is 2.5 units per second. Mouse sensitivity is 0.1 degrees per
pixel. While the window is open, the mouse is captured.

## Library use

- `kaboom.camera`
  - `Camera`: has `position`, `front`, `up`, `yaw` and `pitch`, and the
    methods `look(dx, dy)`, `move(movements, delta_time)` and `view_matrix()`.
  - `Movement`: an enum of `FORWARD`, `BACKWARD`, `LEFT`, `RIGHT`, `UP` and
    `DOWN`.
  - `look_at` and `perspective`: numpy 4×4 matrix helpers. They raise
    `ValueError` for degenerate input.
- `kaboom.shader`
  - `Shader`: compiles and links a GLSL program, and raises `ShaderError`
    (with `stage` and `log`) when either step fails.
  - `set_uniform`: accepts an int, a float or a 4×4 matrix.
  - `delete()`: releases the program. A `Shader` also works as a context
    manager.
- `kaboom.texture`
  - `decode_image(path)`: returns `ImageData` (`width`, `height`, `channels`,
    `pixels`, `format`).
  - `load_texture(path)`: uploads the image as a repeating, linearly filtered,
    mipmapped 2D texture and returns its id.
  - Both raise `TextureError` when the file cannot be read.
- `kaboom.cursor`: `Cursor` draws the crosshair with `render()` and frees its
  GL objects with `delete()`.
- `kaboom.app`
  - `GameWindow`: the window together with its scene.
  - `movements_from_keys`: maps a key-state mapping to `Movement` values.
  - `main(argv=None)`: the command's entry point.

Only the camera and matrix helpers, `decode_image` and `movements_from_keys`
work without a GL context.

```python
from kaboom.camera import Camera, Movement

camera = Camera()
camera.look(10, 0)
camera.move({Movement.FORWARD}, 0.016)
view = camera.view_matrix()
```

## What it does not do

This is a walk-around scene only. It has no shooting, no other players or
opponents, no collision with the platform, and no scoring or game rules.