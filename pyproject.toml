[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cfoundry"
version = "1.4.0"
description = "Foundation utilities: bit strings, linked lists, hash tables, B-trees, dynamic arrays and strings, diagnostics, process and file helpers, and a minimal HTTP server."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "btree",
    "hashtable",
    "linked list",
    "bitstring",
    "hex",
    "byte order",
    "mmap",
    "http",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
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

[tool.hatch.build.targets.wheel]
packages = ["cfoundry"]

[tool.pytest.ini_options]
addopts = "-ra"
