[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numlab"
version = "0.1.0"
description = "Small numerical experiments: Euler's method, Gaussian elimination, diffusion, a tiny neural network and graph drawing"
requires-python = ">=3.10"
keywords = ["numerical methods", "euler", "gaussian elimination", "diffusion", "neural network", "graph"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "numpy",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
numlab-euler = "numlab.euler:main"
numlab-gaussian = "numlab.gaussian:main"
numlab-diffusion = "numlab.diffusion:main"
numlab-neuralnet = "numlab.neuralnet:main"
numlab-graphs = "numlab.graphs:main"

[tool.hatch.build.targets.wheel]
packages = ["numlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
