[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "toonfmt"
version = "0.4.5"
description = "Building blocks for Token-Oriented Object Notation (TOON): delimiters, quoting, number formatting, normalisation, validation, errors and options"
requires-python = ">=3.10"
dependencies = []
keywords = ["toon", "format", "llm", "token", "serialization"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["toonfmt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
