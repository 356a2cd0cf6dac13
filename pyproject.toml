[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "musiclife"
version = "0.1.0"
description = "A text-based game about leading a band from rehearsal rooms to international fame"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "text-based", "simulation", "music", "band", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Romanian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
musiclife = "musiclife.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["musiclife"]

[tool.pytest.ini_options]
addopts = "-ra"
