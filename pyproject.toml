[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nodeprune"
version = "0.1.0"
description = "Find node_modules directories, report the disk space they use, and prune the ones you pick."
requires-python = ">=3.10"
keywords = ["node_modules", "disk usage", "cleanup", "cli", "javascript"]
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
    "Topic :: Utilities",
]
dependencies = [
    "rich",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
nodeprune = "nodeprune.app:main"

[tool.hatch.build.targets.wheel]
packages = ["nodeprune"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
