"""Image decoding and GL texture upload."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from PIL import Image

_MODE_CHANNELS = {"L": 1, "LA": 2, "RGB": 3, "RGBA": 4}


class TextureError(RuntimeError):
    """An image could not be read as a texture."""


@dataclass(frozen=True)
class ImageData:
    """Decoded pixels, rows from the top, channels as stored in the file."""

    width: int
    height: int
    channels: int
    pixels: bytes

    @property
    def format(self) -> str:
        """The GL pixel format used for upload."""
        return "RGBA" if self.channels == 4 else "RGB"


def _gl():
    from pyglet import gl

    return gl


def decode_image(path) -> ImageData:
    """Read an image file, keeping its own channel count."""
    try:
        with Image.open(path) as image:
            image.load()
            if image.mode not in _MODE_CHANNELS:
                has_alpha = "A" in image.getbands() or "transparency" in image.info
                image = image.convert("RGBA" if has_alpha else "RGB")
            return ImageData(
                width=image.width,
                height=image.height,
                channels=_MODE_CHANNELS[image.mode],
                pixels=image.tobytes(),
            )
    except (OSError, ValueError) as exc:
        raise TextureError(f"Failed to load texture: {path}") from exc


def _upload_pixels(image: ImageData) -> bytes:
    """Pixels laid out to match ``image.format``."""
    if image.channels >= 3:
        return image.pixels
    grey = np.frombuffer(image.pixels, dtype=np.uint8).reshape(
        image.height, image.width, image.channels
    )[..., :1]
    return np.repeat(grey, 3, axis=2).tobytes()


def load_texture(path) -> int:
    """Create a repeating, mipmapped 2D texture from an image file."""
    image = decode_image(path)
    pixels = _upload_pixels(image)
    gl = _gl()

    texture = gl.GLuint()
    gl.glGenTextures(1, texture)
    gl.glBindTexture(gl.GL_TEXTURE_2D, texture)
    gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_S, gl.GL_REPEAT)
    gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_T, gl.GL_REPEAT)
    gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MIN_FILTER, gl.GL_LINEAR)
    gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MAG_FILTER, gl.GL_LINEAR)

    pixel_format = gl.GL_RGBA if image.format == "RGBA" else gl.GL_RGB
    gl.glPixelStorei(gl.GL_UNPACK_ALIGNMENT, 1)
    gl.glTexImage2D(
        gl.GL_TEXTURE_2D,
        0,
        pixel_format,
        image.width,
        image.height,
        0,
        pixel_format,
        gl.GL_UNSIGNED_BYTE,
        pixels,
    )
    gl.glGenerateMipmap(gl.GL_TEXTURE_2D)
    return texture.value