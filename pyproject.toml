[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eraboard"
version = "0.1.0"
description = "Interactive time-travel boarding desk: waiting list, boarded passengers and destination eras"
requires-python = ">=3.10"
dependencies = []
keywords = ["queue", "waiting-list", "menu", "boarding", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
eraboard = "eraboard.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["eraboard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
