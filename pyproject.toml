[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gapractica"
version = "0.1.0"
description = "A small genetic-algorithm workbench: binary and Gray encoded populations, evaluation, selection and fitness."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "genetic algorithm",
    "gray code",
    "optimization",
    "evolutionary computation",
    "curses",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Natural Language :: Spanish",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gapractica = "gapractica.cli:main"
gapractica-tui = "gapractica.tui:main"

[tool.hatch.build.targets.wheel]
packages = ["gapractica"]

[tool.hatch.build.targets.sdist]
include = ["gapractica", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
