[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pseudoshell"
version = "0.1.0"
description = "A tiny shell with built-in file commands, run interactively or over a batch file"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "command-line", "batch", "filesystem"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: System Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pseudo-shell = "pseudoshell.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["pseudoshell"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
