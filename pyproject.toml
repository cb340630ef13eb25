[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "liteschema"
version = "0.1.0"
description = "Discover the schema of an SQLite database and write it back out as CREATE statements"
requires-python = ">=3.10"
dependencies = []
keywords = ["sqlite", "schema", "discovery", "introspection", "ddl", "database"]
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
    "Topic :: Database",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["liteschema"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
