[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "anticheat"
version = "0.1.0"
description = "Launches a target program, checks whether it is running and terminates it"
requires-python = ">=3.10"
dependencies = []
keywords = ["anti-cheat", "process", "launcher", "supervisor"]
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
    "Topic :: Security",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
anticheat = "anticheat.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["anticheat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
