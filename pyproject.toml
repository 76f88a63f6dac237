[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "forgemath"
version = "0.1.0"
description = "Column-major 3x3 and 4x4 matrices and 2D points for graphics and game math"
requires-python = ">=3.10"
dependencies = []
keywords = ["matrix", "linear algebra", "graphics", "transform", "point", "3d"]
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
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["forgemath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
