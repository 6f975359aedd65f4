[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mzd2"
version = "0.2.1"
description = "Core data structures and helpers for a tile-based raster map editor"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["map", "tiles", "editor", "qoi", "sparse", "grid", "uuid7"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["mzd2"]

[tool.pytest.ini_options]
addopts = "-ra"
