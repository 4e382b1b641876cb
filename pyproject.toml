[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algosolve"
version = "0.1.0"
description = "Solutions to classic algorithmic problems on arrays, strings, grids, graphs and trees"
requires-python = ">=3.10"
dependencies = [
    "sortedcontainers",
]
keywords = ["algorithms", "graphs", "dynamic-programming", "grids", "strings", "trees"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["algosolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
