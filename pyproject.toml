[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "lexlabs"
version = "0.1.0"
description = "Small lexical analysers, token models and parsers for toy languages"
requires-python = ">=3.10"
dependencies = []
keywords = ["lexer", "scanner", "parser", "tokenizer", "ll1", "syntax tree"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lexlabs-backquote = "lexlabs.backquote:main"

[tool.setuptools.packages.find]
include = ["lexlabs*"]

[tool.pytest.ini_options]
addopts = "-ra"
