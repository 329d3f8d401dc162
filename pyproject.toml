[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsalgos"
version = "0.1.0"
description = "Singly and doubly linked lists and bubble sort, with small demonstrations"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "doubly linked list", "bubble sort", "data structures", "algorithms"]
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsalgos-demo = "dsalgos.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["dsalgos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
