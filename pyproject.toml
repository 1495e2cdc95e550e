[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinyvsql"
version = "0.1.0"
description = "SQL tokenizer, statement recognizer and parser, and column-oriented query helpers for a small database engine"
requires-python = ">=3.10"
dependencies = []
keywords = ["sql", "parser", "tokenizer", "database", "columnar", "query"]
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

[tool.hatch.build.targets.wheel]
packages = ["tinyvsql"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
