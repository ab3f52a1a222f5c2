[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "powerindex"
version = "0.1.0"
description = "Banzhaf power index of weighted voting games by backtracking over winning coalitions"
requires-python = ">=3.10"
dependencies = []
keywords = ["banzhaf", "power index", "weighted voting", "coalition", "game theory", "backtracking"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
powerindex = "powerindex.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["powerindex"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
