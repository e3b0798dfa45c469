[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "paraaudit"
version = "0.1.0"
description = "A command-line tool for auditing and working with a PARA (projects, areas, resources, archive) directory tree."
requires-python = ">=3.10"
keywords = ["cli", "para", "second-brain", "organisation", "audit"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = [
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
para = "paraaudit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["paraaudit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
