[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tombeau"
version = "0.1.0"
description = "Game rules of a gamebook-style role-playing adventure: characters, items, trials, question screens and layout helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "role-playing", "gamebook", "rpg", "adventure"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tombeau"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
