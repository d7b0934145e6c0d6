[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "godo"
version = "0.1.0"
description = "A command-line todo list manager with per-task time tracking"
requires-python = ">=3.10"
dependencies = [
    "click",
]
keywords = ["todo", "tasks", "cli", "time-tracking", "productivity"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
godo = "godo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["godo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
