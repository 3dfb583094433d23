[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "toytools"
version = "0.1.0"
description = "Tooling for the Toy scripting language: a bytecode disassembler, reference-counted values and source utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["toy", "bytecode", "disassembler", "markdown", "header-guard", "getopt"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Disassemblers",
    "Topic :: Software Development :: Documentation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
toy-disassembler = "toytools.cli:main"
toy-mecha = "toytools.mecha:main"
toy-guard = "toytools.guard:main"
toy-uptown = "toytools.uptown:main"

[tool.hatch.build.targets.wheel]
packages = ["toytools"]

[tool.pytest.ini_options]
addopts = "-ra"
