[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ventas"
version = "0.1.0"
description = "Sales aggregates from CSV records of South American sales, plus the small data structures they use"
requires-python = ">=3.10"
dependencies = []
keywords = ["sales", "analysis", "csv", "priority-queue", "hash-map", "graph", "data-structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ventas"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
