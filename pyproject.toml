[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "smwkit"
version = "0.1.0"
description = "Read and decode Super Mario World ROM data: addresses, headers, level layers, graphics tiles and Map16 tilesets"
requires-python = ">=3.10"
dependencies = []
keywords = ["snes", "rom", "super-mario-world", "romhacking", "graphics", "lorom", "map16"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["smwkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
