[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shopcore"
version = "0.1.0"
description = "Linked list, hash table, option parsing, console prompts and small utilities for a terminal webstore"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "hash table", "console", "prompts", "command line", "webstore"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
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

[project.scripts]
shopcore-cat = "shopcore.cat:main"

[tool.hatch.build.targets.wheel]
packages = ["shopcore"]

[tool.pytest.ini_options]
addopts = "-ra"
