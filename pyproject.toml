[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "munkreskit"
version = "2.0.0"
description = "Munkres (Hungarian) algorithm for the linear assignment problem, with a small dense matrix type and container adapters."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "munkres",
    "hungarian-algorithm",
    "assignment-problem",
    "linear-assignment",
    "optimization",
    "matrix",
]
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
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
munkreskit-generate = "munkreskit.matrixio:main"
munkreskit-example = "munkreskit.example:main"

[tool.hatch.build.targets.wheel]
packages = ["munkreskit"]

[tool.hatch.build.targets.sdist]
include = [
    "munkreskit",
    "tests",
    "README.md",
    "pyproject.toml",
]

[tool.pytest.ini_options]
addopts = "-ra"
