[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cslabs"
version = "0.1.0"
description = "Classic data-structure and algorithm exercises: a DCEL, binary search and 2-3 trees, word ladders, a sentiment hash table, a jug puzzle solver and a party battle game."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "algorithms",
    "dcel",
    "binary-search-tree",
    "two-three-tree",
    "hash-table",
    "word-ladder",
    "water-jug",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cslabs-battle = "cslabs.battle:main"
cslabs-word-ladder = "cslabs.word_ladder:main"
cslabs-sentiment = "cslabs.sentiment:main"
cslabs-bstree = "cslabs.bstree:main"
cslabs-23tree = "cslabs.two_three_tree:main"
cslabs-jug = "cslabs.jug:main"

[tool.hatch.build.targets.wheel]
packages = ["cslabs"]

[tool.hatch.build.targets.sdist]
include = ["cslabs", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
