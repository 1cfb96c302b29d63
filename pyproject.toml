[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "colorize"
version = "0.1.0"
description = "Wrap text in ANSI colour and style escape codes, and strip them again."
requires-python = ">=3.10"
dependencies = []
keywords = ["ansi", "color", "colour", "terminal", "escape codes", "sgr"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["colorize"]

[tool.pytest.ini_options]
addopts = "-ra"
