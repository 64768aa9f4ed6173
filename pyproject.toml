[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quadcell"
version = "0.1.0"
description = "Quad-edge polyhedral cells with Euler operators and Wavefront OBJ input and output"
requires-python = ">=3.10"
dependencies = []
keywords = ["quad-edge", "polyhedron", "mesh", "topology", "euler-operators", "wavefront", "obj"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
quadcell = "quadcell.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["quadcell"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
