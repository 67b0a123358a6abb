[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pacmaze"
version = "0.1.0"
description = "A small tile-based maze game: collect every coin, then reach the exit."
requires-python = ">=3.10"
keywords = ["game", "maze", "arcade", "pygame", "tilemap"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame>=2.1",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
]

[project.scripts]
pacmaze = "pacmaze.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pacmaze"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
