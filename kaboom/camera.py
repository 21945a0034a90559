"""First-person camera and the matrix helpers used to render through it."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable

import numpy as np

SENSITIVITY = 0.1
SPEED = 2.5
PITCH_LIMIT = 89.0


class Movement(enum.Enum):
    """A direction the camera can travel in during one update."""

    FORWARD = enum.auto()
    BACKWARD = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()


def _vector(values) -> np.ndarray:
    return np.asarray(values, dtype=np.float64).reshape(3)


def _normalize(vector: np.ndarray) -> np.ndarray:
    length = np.linalg.norm(vector)
    if length == 0:
        raise ValueError("cannot normalize a zero-length vector")
    return vector / length


def look_at(eye, center, up) -> np.ndarray:
    """Return a right-handed 4x4 view matrix looking from ``eye`` at ``center``."""
    eye, center, up = _vector(eye), _vector(center), _vector(up)
    forward = _normalize(center - eye)
    side = _normalize(np.cross(forward, up))
    upward = np.cross(side, forward)

    matrix = np.identity(4)
    matrix[0, :3] = side
    matrix[1, :3] = upward
    matrix[2, :3] = -forward
    matrix[0, 3] = -(side @ eye)
    matrix[1, 3] = -(upward @ eye)
    matrix[2, 3] = forward @ eye
    return matrix


def perspective(fovy_degrees, aspect, near, far) -> np.ndarray:
    """Return a right-handed perspective projection with a -1..1 depth range."""
    if aspect == 0:
        raise ValueError("aspect ratio must not be zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(math.radians(fovy_degrees) / 2.0)
    if tan_half == 0:
        raise ValueError("field of view must not be zero")

    matrix = np.zeros((4, 4))
    matrix[0, 0] = 1.0 / (aspect * tan_half)
    matrix[1, 1] = 1.0 / tan_half
    matrix[2, 2] = -(far + near) / (far - near)
    matrix[2, 3] = -(2.0 * far * near) / (far - near)
    matrix[3, 2] = -1.0
    return matrix


class Camera:
    """A fly-through camera steered by relative mouse motion and movement keys."""

    def __init__(self):
        self.position = np.array([0.0, 1.0, 0.0])
        self.front = np.array([0.0, 0.0, -1.0])
        self.up = np.array([0.0, 1.0, 0.0])
        self.yaw = -90.0
        self.pitch = 0.0

    def look(self, dx, dy) -> None:
        """Turn by a relative mouse motion; ``dy`` grows downwards as on screen."""
        self.yaw += dx * SENSITIVITY
        pitch = self.pitch - dy * SENSITIVITY
        self.pitch = max(-PITCH_LIMIT, min(PITCH_LIMIT, pitch))

        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        self.front = _normalize(
            np.array(
                [
                    math.cos(yaw) * math.cos(pitch),
                    math.sin(pitch),
                    math.sin(yaw) * math.cos(pitch),
                ]
            )
        )

    def move(self, movements: Iterable[Movement], delta_time) -> None:
        """Travel in every requested direction for ``delta_time`` seconds."""
        wanted = set(movements)
        if not wanted:
            return
        speed = SPEED * delta_time
        right = _normalize(np.cross(self.front, self.up))
        steps = {
            Movement.FORWARD: self.front,
            Movement.BACKWARD: -self.front,
            Movement.LEFT: -right,
            Movement.RIGHT: right,
            Movement.UP: self.up,
            Movement.DOWN: -self.up,
        }
        for movement in Movement:
            if movement in wanted:
                self.position = self.position + speed * steps[movement]

    def view_matrix(self) -> np.ndarray:
        """Return the view matrix for the current position and heading."""
        return look_at(self.position, self.position + self.front, self.up)