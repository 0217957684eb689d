[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "exprlang"
version = "0.1.0"
description = "A small lexer and Pratt parser for integer arithmetic and logical expressions"
requires-python = ">=3.10"
dependencies = []
keywords = ["lexer", "parser", "pratt", "expressions", "tokenizer"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
exprlang = "exprlang.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["exprlang"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
