[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "boundedds"
version = "0.1.0"
description = "Fixed-capacity stacks, queues and deques, with a backtracking maze solver and interactive demos"
requires-python = ">=3.10"
dependencies = []
keywords = ["stack", "queue", "deque", "circular buffer", "ring buffer", "maze", "data structures", "teaching"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
boundedds-stack = "boundedds.stack:main"
boundedds-queue = "boundedds.queues:main"
boundedds-deque = "boundedds.deque:main"
boundedds-reverse = "boundedds.reverse:main"
boundedds-maze = "boundedds.maze:main"

[tool.hatch.build.targets.wheel]
packages = ["boundedds"]

[tool.pytest.ini_options]
addopts = "-ra"
