[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linreport"
version = "0.1.0"
description = "Plain-Python dense linear algebra (LU, Householder QR, QR eigenvalues) with a random-matrix timing report"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "linear algebra",
    "determinant",
    "LU decomposition",
    "QR decomposition",
    "QR algorithm",
    "eigenvalues",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
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
linreport = "linreport.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["linreport"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
