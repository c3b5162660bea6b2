[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vikingdefense"
version = "1.0.0"
description = "A real-time tower defense game: hold the wall against waves of vikings."
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["game", "tower-defense", "pygame", "strategy"]
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
    "Topic :: Games/Entertainment :: Real Time Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vikingdefense = "vikingdefense.app:main"

[tool.hatch.build.targets.wheel]
packages = ["vikingdefense"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
