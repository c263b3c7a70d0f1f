[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "ytengine"
version = "0.1.0"
description = "3D game math: vectors, 4x4 matrices, quaternions, collision tests, world transforms and JSON-backed tuning variables."
requires-python = ">=3.10"
dependencies = []
keywords = ["vector", "matrix", "quaternion", "collision", "obb", "aabb", "game", "3d"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["ytengine*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
