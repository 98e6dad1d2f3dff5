[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algoplay"
version = "0.1.0"
description = "Classic algorithms, data structures, judge-style puzzles, falling snow and a two-player ships game"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = [
    "algorithms",
    "sorting",
    "heap",
    "queue",
    "stack",
    "puzzles",
    "ships",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
algoplay-heap = "algoplay.heap:main"
algoplay-sort = "algoplay.sorting:main"
algoplay-leader = "algoplay.leader:main"
algoplay-spoj = "algoplay.spoj:main"
algoplay-snow = "algoplay.snow:main"
algoplay-ships = "algoplay.ships.ui:main"

[tool.hatch.build.targets.wheel]
packages = ["algoplay"]

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
warn_unused_ignores = true
