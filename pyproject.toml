[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "seriesmath"
version = "0.1.0"
description = "Elementary math functions computed from power series and integer truncation"
requires-python = ">=3.10"
dependencies = []
keywords = ["math", "trigonometry", "series", "ceil", "arctangent", "arcsine", "arccosine"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["seriesmath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
