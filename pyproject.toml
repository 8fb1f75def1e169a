[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "savemanager"
version = "0.1.0"
description = "Save-data backup sets, metadata, configuration, exclusion lists and batch menu logic for Wii U and vWii titles"
requires-python = ">=3.10"
dependencies = []
keywords = ["wii u", "vwii", "savedata", "backup", "restore", "metadata"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Backup",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["savemanager"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
