[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bugdedup"
version = "0.1.0"
description = "Replay of bug report histories for duplicate retrieval: detector loop, indexing policies, result collectors and reporting"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bug reports",
    "duplicate detection",
    "information retrieval",
    "recall",
    "mean average precision",
    "configuration files",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Bug Tracking",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bugdedup"]

[tool.hatch.build.targets.sdist]
include = ["bugdedup", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
