[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nextline"
version = "1.0.0"
description = "Read lines one at a time from file descriptors, keeping separate leftovers for each descriptor"
requires-python = ">=3.10"
dependencies = []
keywords = ["readline", "file descriptor", "lines", "buffered reading"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nextline"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
