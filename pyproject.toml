[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "monotext"
version = "0.1.0"
description = "A small monospace text editor with selections, line swapping and a scrollable, zoomable, rotatable view"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["text editor", "editor", "pygame", "monospace"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
monotext = "monotext.app:main"

[tool.hatch.build.targets.wheel]
packages = ["monotext"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
