[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "symscan"
version = "0.1.0"
description = "Identifier scanning with hashed symbol tables, string pools and token report lines"
requires-python = ">=3.10"
dependencies = []
keywords = ["symbol table", "hash table", "scanner", "identifiers", "compiler", "string pool"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
symscan-ids = "symscan.identifiers:main"
symscan-hash = "symscan.hashtable:main"
symscan-text = "symscan.textfiles:main"

[tool.hatch.build.targets.wheel]
packages = ["symscan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
