[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "leftheap"
version = "0.1.0"
description = "A mergeable max-priority queue built on a leftist heap, with rollback on comparison failures"
requires-python = ">=3.10"
dependencies = []
keywords = ["priority queue", "heap", "leftist heap", "mergeable heap", "data structures"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
leftheap-selfcheck = "leftheap.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["leftheap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
