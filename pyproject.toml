[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jsonweave"
version = "0.1.0"
description = "Flag-driven JSON encoding, structured JSON errors, lookup3 hashing and an insertion-ordered hash table"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "encoder", "serialization", "hashtable", "lookup3"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: File Formats :: JSON",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jsonweave"]

[tool.hatch.build.targets.sdist]
include = ["jsonweave", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
