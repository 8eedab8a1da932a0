[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patiengine"
version = "0.1.0"
description = "Small 3D engine utilities: vectors, 4x4 matrices, curves, OBJ/WAV loading, tunable variables and a particle simulation."
requires-python = ">=3.10"
dependencies = []
keywords = ["3d", "matrix", "vector", "particles", "obj", "wav", "catmull-rom", "slerp"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["patiengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
