[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lokit"
version = "0.1.0"
description = "Everyday helpers for sequences, numbers, strings, timing, retries, debouncing and throttling"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "utilities",
    "collections",
    "functional",
    "retry",
    "debounce",
    "throttle",
    "saga",
    "case conversion",
]
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
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lokit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
