[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "probehash"
version = "0.1.0"
description = "Linear-probing hash tables comparing a character-sum hash with Fibonacci hashing"
requires-python = ">=3.10"
dependencies = []
keywords = ["hash table", "linear probing", "fibonacci hashing", "data structures", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
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

[project.scripts]
probehash = "probehash.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["probehash"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
