[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "starlyze"
version = "0.1.0"
description = "Analyse STARlight simulation output and plot invariant masses, momenta and detector acceptance"
requires-python = ">=3.10"
keywords = ["starlight", "physics", "invariant mass", "histogram", "ultra-peripheral collisions"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]
dependencies = [
    "matplotlib",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
starlyze = "starlyze.plots:main"

[tool.hatch.build.targets.wheel]
packages = ["starlyze"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
