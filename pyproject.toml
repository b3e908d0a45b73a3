[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rcask"
version = "0.1.0"
description = "Bitcask-inspired log-structured hash table persisted to append-only segment files."
requires-python = ">=3.10"
dependencies = []
keywords = ["key-store", "hash-table", "log-structured", "bitcask"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Database Engines/Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rcask = "rcask.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rcask"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
