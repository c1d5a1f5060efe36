[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "braintercourse"
version = "0.1.0"
description = "A Brainfuck interpreter that shows the program, the memory cells used and the output in a window"
requires-python = ">=3.10"
keywords = ["brainfuck", "interpreter", "esoteric", "visualizer", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
braintercourse = "braintercourse.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["braintercourse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
