[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dronenav"
version = "0.1.0"
description = "Geometry, histogram, failsafe, world-loading and path utilities for drone obstacle avoidance and path planning"
requires-python = ">=3.10"
keywords = ["drone", "obstacle-avoidance", "path-planning", "bezier", "polar-histogram"]
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
    "Topic :: Scientific/Engineering",
]
dependencies = [
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["dronenav"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
