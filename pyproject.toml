[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rebarsim"
version = "0.1.0"
description = "Flexural and shear reinforcement design for simply supported concrete bridge girders, with cost estimates and section drawings"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["concrete", "rebar", "reinforcement", "bridge", "girder", "structural engineering"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
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
test = [
    "pytest",
]

[project.scripts]
rebarsim = "rebarsim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rebarsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
