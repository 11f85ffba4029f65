[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "analgo"
version = "0.1.0"
description = "Classic algorithm exercises: sorting, divide and conquer, dynamic programming, greedy methods, hashing and Huffman coding"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "sorting",
    "divide-and-conquer",
    "dynamic-programming",
    "knapsack",
    "huffman",
    "hashing",
    "closest-pair",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
analgo-guess = "analgo.guessing:main"
analgo-huffman = "analgo.huffman:main"

[tool.hatch.build.targets.wheel]
packages = ["analgo"]

[tool.hatch.build.targets.sdist]
include = ["analgo", "tests", "README.md", "pyproject.toml"]

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
warn_redundant_casts = true
