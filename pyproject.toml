[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clearlex"
version = "0.1.0"
description = "Lexer for the Clear programming language: turns source text into a stream of tokens"
requires-python = ">=3.10"
dependencies = []
keywords = ["lexer", "tokenizer", "compiler", "clear", "indentation"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
clearlex = "clearlex.lexer:main"

[tool.hatch.build.targets.wheel]
packages = ["clearlex"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
