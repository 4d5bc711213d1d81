[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reachguard"
version = "0.1.0"
description = "Safety checks, state recording and display helpers for reachability monitoring of a bicycle-model vehicle"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "reachability",
    "hyper-rectangle",
    "bicycle model",
    "runtime assurance",
    "collision checking",
    "autonomous vehicles",
    "safety monitor",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["reachguard"]

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
