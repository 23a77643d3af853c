[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jsonmap"
version = "0.1.0"
description = "Flatten JSON documents into a typed key/value map with integer and string vectors"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "map", "flatten", "key-value", "linked-list", "logging"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: File Formats :: JSON",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jsonmap"]

[tool.pytest.ini_options]
addopts = "-ra"
