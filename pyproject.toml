[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termage"
version = "0.1.0"
description = "A small terminal game engine with entities, events, animation and sound, plus two sample arcade games"
requires-python = ">=3.10"
keywords = ["game engine", "terminal", "curses", "arcade", "ascii"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
termage = "termage.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["termage"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
