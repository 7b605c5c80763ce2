[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "virtualrig"
version = "0.1.0"
description = "Skeletal animation building blocks: BVH motion capture loading, vector and matrix math, dual quaternions, half-edge structures and hash containers."
requires-python = ">=3.10"
dependencies = []
keywords = ["bvh", "motion-capture", "skeleton", "dual-quaternion", "half-edge", "animation", "matrix"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["virtualrig"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
