[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kotalist"
version = "1.0.0"
description = "An ordered registry of cities and their residents"
requires-python = ">=3.10"
dependencies = []
keywords = ["cities", "residents", "registry"]
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
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kotalist"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
