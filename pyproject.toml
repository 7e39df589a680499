[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yuletide"
version = "0.1.0"
description = "Solvers for Advent of Code puzzles from the 2022 and 2025 seasons"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "linear-programming", "simplex", "branch-and-bound"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Natural Language :: English",
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
test = ["pytest"]

[project.scripts]
yuletide = "yuletide.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["yuletide"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
