[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kaboom"
version = "0.1.0"
description = "A small first-person scene: a textured grass platform, free-look camera and crosshair."
requires-python = ">=3.10"
keywords = ["game", "opengl", "first-person", "camera", "pyglet"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: First Person Shooters",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "pyglet",
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
kaboom = "kaboom.app:main"

[tool.hatch.build.targets.wheel]
packages = ["kaboom"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
