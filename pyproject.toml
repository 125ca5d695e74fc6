[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "serialscope"
version = "0.1.0"
description = "Data model for plotting serial-port streams: ring buffers, sample packs, port selection, view options, recording options and scale picking"
requires-python = ">=3.10"
dependencies = ["pyserial"]
keywords = ["serial", "plot", "oscilloscope", "ring buffer", "data acquisition"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
    "Topic :: Terminals :: Serial",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["serialscope"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
