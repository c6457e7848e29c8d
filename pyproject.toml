[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fractalforge"
version = "0.1.0"
description = "Fractal parameter model, smooth state interpolation, YAML configuration files and shader uniform sets for Mandelbrot-family renderers"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["fractal", "mandelbrot", "julia", "burning-ship", "tricorn", "orbit-trap", "yaml"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["fractalforge"]

[tool.pytest.ini_options]
addopts = "-ra"
