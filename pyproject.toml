[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "preselect"
version = "0.1.0"
description = "Scan text and CSV files in a directory tree and hand their entries to a processor that keeps those resembling a set of keywords."
requires-python = ">=3.10"
dependencies = []
keywords = ["text", "csv", "tokenizer", "filter", "similarity", "keywords"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Filters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
preselect = "preselect.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["preselect"]

[tool.pytest.ini_options]
addopts = "-ra"
