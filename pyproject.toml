[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arboles"
version = "0.1.0"
description = "Small tree data structures: B-trees and B+ trees with lazy deletion, and n-ary trees with XML persistence"
requires-python = ">=3.10"
dependencies = []
keywords = ["tree", "b-tree", "b+tree", "n-ary tree", "data structures", "xml"]
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
test = ["pytest", "hypothesis"]

[project.scripts]
arboles-demo = "arboles.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["arboles"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
