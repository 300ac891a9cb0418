[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arenalegends"
version = "0.1.0"
description = "Cards and a small scene-based pygame engine for a two-player real-time card battle arena game."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "card game", "real-time strategy", "arena", "pygame", "engine"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Real Time Strategy",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["arenalegends"]

[tool.hatch.build.targets.sdist]
include = ["arenalegends", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
