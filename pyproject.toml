[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labkit"
version = "0.1.0"
description = "Coursework toolkit: word-statistics tables, numerical methods, regular-expression automata and graph algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "2-3-tree",
    "sorted-array",
    "numerical-methods",
    "fixed-point-iteration",
    "numerical-integration",
    "monte-carlo",
    "regular-expressions",
    "nfa",
    "graphs",
    "dijkstra",
    "sequence-assembly",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
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
test = ["pytest"]

[project.scripts]
labkit-fixedpoint = "labkit.fixedpoint:main"
labkit-integrate = "labkit.integration:main"
labkit-regex = "labkit.regex_nfa:main"
labkit-assemble = "labkit.assembly:main"

[tool.hatch.build.targets.wheel]
packages = ["labkit"]

[tool.pytest.ini_options]
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
