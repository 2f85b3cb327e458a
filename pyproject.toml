[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flecsolve"
version = "0.0.1"
description = "Vector, multivector and operator building blocks for composing linear and nonlinear solvers"
requires-python = ">=3.10"
dependencies = []
keywords = ["linear algebra", "vectors", "multivector", "operators", "solvers"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["flecsolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
