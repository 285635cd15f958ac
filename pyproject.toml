[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "uncertain"
version = "0.3.1"
description = "Fast and correct computations with uncertain values."
requires-python = ">=3.10"
keywords = ["random", "statistics", "probability", "uncertainty", "sprt", "monte-carlo"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["uncertain"]

[tool.hatch.build.targets.sdist]
include = [
    "uncertain",
    "tests",
]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
