[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "specter"
version = "0.1.0"
description = "Histogramming and gating of event data with 1D and 2D cuts"
requires-python = ">=3.10"
dependencies = []
keywords = ["histogram", "cuts", "gates", "physics", "data analysis"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["specter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
