[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "decimal96"
version = "0.1.0"
description = "A 96-bit fixed-scale decimal type with banker's rounding and overflow reporting"
requires-python = ">=3.10"
dependencies = []
keywords = ["decimal", "fixed-point", "arithmetic", "96-bit", "bankers-rounding"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["decimal96"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
