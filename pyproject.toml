[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "td5maptool"
version = "0.1.0"
description = "Read, inspect and tune calibration tables of Td5 engine control map images"
requires-python = ">=3.10"
dependencies = []
keywords = ["td5", "ecu", "map", "calibration", "tuning", "fuel map"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["td5maptool"]

[tool.pytest.ini_options]
addopts = "-ra"
