[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubesim"
version = "0.1.0"
description = "Component-based scene objects with typed connectors, transforms, a camera, an orbit controller and per-frame input and timing"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["component-system", "game-engine", "quaternion", "scene-graph", "puzzle"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["cubesim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
