[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algokit"
version = "0.1.0"
description = "Classic ciphers and data structures in plain Python"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "ciphers",
    "data-structures",
    "avl-tree",
    "red-black-tree",
    "b-tree",
    "trie",
    "heap",
    "sha256",
    "morse-code",
]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["algokit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
