[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "structlab"
version = "1.0.0"
description = "Data-structure exercises: long-mantissa real number division, a student table with key sorting, and sparse matrix multiplication."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "data structures",
    "sparse matrix",
    "sorting",
    "arbitrary precision",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
structlab-divide = "structlab.bigfloat_cli:main"
structlab-matrix-bench = "structlab.matrix_bench:main"

[tool.setuptools.packages.find]
include = ["structlab*"]

[tool.pytest.ini_options]
addopts = "-ra"
