"""A first-person scene with a free-look camera, textured platform and crosshair."""

__version__ = "0.1.0"
__all__ = ["__version__"]