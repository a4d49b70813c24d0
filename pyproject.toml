[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ssdsim"
version = "0.1.0"
description = "A file-backed SSD simulator with an optimising write/erase command buffer"
requires-python = ">=3.10"
dependencies = []
keywords = ["ssd", "simulator", "nand", "command-buffer", "emulator"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ssdsim = "ssdsim.ssd:main"

[tool.hatch.build.targets.wheel]
packages = ["ssdsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
