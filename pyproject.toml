[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "depotsim"
version = "0.1.0"
description = "Discrete-event simulation of packages moving between warehouses over a transport network"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "discrete-event", "logistics", "warehouse", "scheduling"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
depotsim = "depotsim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["depotsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
