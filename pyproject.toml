[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pbsproto"
version = "0.1.0"
description = "Protocol constants, message codes and cluster metric helpers for a PBS-style batch system"
requires-python = ">=3.10"
dependencies = []
keywords = ["pbs", "batch", "scheduler", "cluster", "dis", "torque"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Distributed Computing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pbsproto"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
