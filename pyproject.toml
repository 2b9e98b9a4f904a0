[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meshstage"
version = "0.1.0"
description = "An interactive OpenGL viewer for triangulated .obj meshes, edited through terminal prompts"
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "pyglet",
]
keywords = ["opengl", "3d", "renderer", "mesh", "obj", "viewer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
meshstage = "meshstage.app:main"

[tool.hatch.build.targets.wheel]
packages = ["meshstage"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
