[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "frameutils"
version = "0.1.0"
description = "Small utilities for frame processing: core logging setup, look-up-table frame conversion and layered JSON configuration."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["logging", "lookup-table", "lut", "json", "configuration", "frames"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["frameutils"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
