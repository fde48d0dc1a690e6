[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zrxid"
version = "0.0.2"
description = "Structured identifiers, glob selectors and selector matching for resources"
requires-python = ">=3.10"
dependencies = []
keywords = ["identifier", "selector", "glob", "matcher", "resource"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zrxid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
