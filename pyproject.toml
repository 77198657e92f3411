[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flowshop"
version = "0.1.0"
description = "Permutation flow-shop scheduling: makespan simulation with brute force, Johnson and NEH heuristics"
requires-python = ">=3.10"
dependencies = []
keywords = ["scheduling", "flow-shop", "makespan", "johnson", "neh", "optimization"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
flowshop = "flowshop.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["flowshop"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
