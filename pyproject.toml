[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "algokit"
version = "0.1.0"
description = "Classic algorithms: bit tricks, binary search, trees, convex hulls, backtracking and dynamic programming"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "binary-search",
    "binary-tree",
    "bst",
    "convex-hull",
    "dynamic-programming",
    "bit-manipulation",
    "backtracking",
]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.setuptools.packages.find]
include = ["algokit*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
