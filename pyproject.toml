[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "healthsys"
version = "0.1.0"
description = "Patient records loaded from CSV, with prefix search and a paged listing in an interactive menu"
requires-python = ">=3.10"
dependencies = []
keywords = ["patients", "healthcare", "csv", "records", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Healthcare Industry",
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
healthsys = "healthsys.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["healthsys"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
