[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mclmath"
version = "0.1.0"
description = "Small maths library: fractions, vectors, trigonometry, statistics, regression and Anderson-Darling tests"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "mathematics",
    "statistics",
    "fraction",
    "median",
    "percentile",
    "anderson-darling",
    "regression",
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
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mclmath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
