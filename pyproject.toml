[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gumble"
version = "0.1.0"
description = "Building blocks for Mumble voice chat clients, with a UDP server ping tool"
requires-python = ">=3.10"
dependencies = []
keywords = ["mumble", "voip", "voice chat", "protocol", "ping", "varint"]
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
    "Topic :: Communications :: Conferencing",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mumble-ping = "gumble.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gumble"]

[tool.hatch.build.targets.sdist]
include = ["gumble", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
