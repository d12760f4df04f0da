[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shmupemup"
version = "0.1.0"
description = "A small vertical shoot-'em-up: dodge falling squares and blast them with laser bolts."
requires-python = ">=3.10"
keywords = ["game", "shmup", "arcade", "shooter", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
shmupemup = "shmupemup.game:main"

[tool.hatch.build.targets.wheel]
packages = ["shmupemup"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
