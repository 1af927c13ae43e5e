[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubkit"
version = "0.1.0"
description = "Value types and error codes for a grid-map raycaster, with C-style text, byte-buffer, linked-list, formatting and line-reading helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["raycasting", "vectors", "strings", "linked-list", "printf", "line-reader"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cubkit"]

[tool.pytest.ini_options]
addopts = "-ra"
