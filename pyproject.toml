[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tilewalk"
version = "0.1.0"
description = "A small tile-based scene where a soldier walks over grass and is blocked by water and a rock"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "tiles", "pygame", "collision", "sprites"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tilewalk = "tilewalk.game:main"

[tool.hatch.build.targets.wheel]
packages = ["tilewalk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
