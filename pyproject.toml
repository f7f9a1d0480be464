[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voxelgame"
version = "0.1.0"
description = "A small networked voxel game: chunked block world, player server and OpenGL client"
requires-python = ">=3.10"
keywords = ["voxel", "game", "chunks", "multiplayer", "opengl"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
voxelgame = "voxelgame.main:main"

[tool.hatch.build.targets.wheel]
packages = ["voxelgame"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
