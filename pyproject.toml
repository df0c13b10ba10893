[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slsreports"
version = "0.1.0"
description = "Reporting, statistics and timing helpers for stochastic local search SAT solvers"
requires-python = ">=3.10"
dependencies = []
keywords = ["sat", "local-search", "cnf", "statistics", "reports", "solver"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["slsreports"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
