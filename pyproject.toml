[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dualdiff"
version = "0.1.0"
description = "Forward-mode automatic differentiation with higher-order dual numbers"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = [
    "automatic differentiation",
    "dual numbers",
    "forward mode",
    "gradient",
    "jacobian",
    "hessian",
    "taylor series",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "numpy"]

[tool.hatch.build.targets.wheel]
packages = ["dualdiff"]

[tool.pytest.ini_options]
addopts = "-ra"
