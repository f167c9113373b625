[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cdatax"
version = "0.1.0"
description = "Small container types: a growable array, a doubly linked list, a ring-buffer queue and a stack"
requires-python = ">=3.10"
dependencies = []
keywords = ["containers", "linked list", "queue", "stack", "ring buffer", "dynamic array"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["cdatax"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
