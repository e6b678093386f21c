[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "contestkit"
version = "0.1.0"
description = "Solutions to classic programming-contest problems on strings, numbers, arrays, intervals, grids and graphs"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "competitive-programming", "contest", "data-structures", "segment-tree"]
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["contestkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
