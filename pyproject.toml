[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arenaforge"
version = "0.1.0"
description = "Warriors, wizards and their weapons: the building blocks of a small role-playing arena"
requires-python = ">=3.10"
dependencies = []
keywords = ["rpg", "game", "arena", "warrior", "wizard", "weapons"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["arenaforge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
