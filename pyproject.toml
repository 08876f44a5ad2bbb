[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nixpic"
version = "0.1.0"
description = "Particle-in-cell building blocks: particle pushers, shape functions, current and moment deposition, Maxwell-Juttner sampling and space-filling curves"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "particle-in-cell",
    "plasma",
    "simulation",
    "shape-function",
    "boris",
    "maxwell-juttner",
    "hilbert-curve",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["nixpic"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
