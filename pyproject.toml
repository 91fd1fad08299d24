[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kongrun"
version = "0.1.0"
description = "Building blocks for a terminal barrel-dodging platform game: level boards, Mario, enemies, HUD and session records"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "terminal", "arcade", "platformer", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kongrun"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
