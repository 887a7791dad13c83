[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "moviestore"
version = "0.1.0"
description = "A small movie rental store: inventory, customers and borrow/return transactions driven by text files."
requires-python = ">=3.10"
dependencies = []
keywords = ["movies", "rental", "inventory", "store", "customers"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
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

[project.scripts]
moviestore = "moviestore.store:main"

[tool.hatch.build.targets.wheel]
packages = ["moviestore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
