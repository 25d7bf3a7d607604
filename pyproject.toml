[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsaworks"
version = "0.1.0"
description = "Classic data structures and algorithms: recursion, arrays, matrices, sorting, linked lists, stacks, queues, graphs and trees."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "sorting",
    "linked-list",
    "stack",
    "queue",
    "graph",
    "binary-tree",
    "recursion",
]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsaworks-array-menu = "dsaworks.arrays:main"

[tool.hatch.build.targets.wheel]
packages = ["dsaworks"]

[tool.pytest.ini_options]
addopts = "-ra"
