[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "apagon"
version = "0.1.0"
description = "Simulation of a hydroelectric power system whose plants depend on rainfall, ending in a blackout when production leaves its safe range"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "hydroelectric", "power-grid", "blackout", "rainfall"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
apagon = "apagon.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["apagon"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
