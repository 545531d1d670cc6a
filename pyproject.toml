[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gfxlab"
version = "0.1.0"
description = "Geometry, image and simulation building blocks for small 3D rendering scenes: BMP loading, planar shadows, tori, a Klein bottle, a room camera and rippling water."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graphics",
    "3d",
    "bmp",
    "shadow-matrix",
    "torus",
    "klein-bottle",
    "camera",
    "water-simulation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["gfxlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
