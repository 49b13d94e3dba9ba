[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quadgui"
version = "0.1.0"
description = "Immediate-mode GUI building blocks: layout cursor, input state, styles, draw commands and mesh rasterization"
requires-python = ">=3.10"
dependencies = []
keywords = ["gui", "immediate-mode", "widgets", "layout", "draw-commands", "mesh"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["quadgui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
