[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pagaf"
version = "0.1.0"
description = "City map builder whose tile placement is constrained by wave function collapse rules"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "city-builder", "tilemap", "wave-function-collapse", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pagaf = "pagaf.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pagaf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
