[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mathlessons"
version = "1.0.0"
description = "Step-by-step arithmetic and geometry lessons, input checks and a small calculator, printed to the console"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "arithmetic",
    "geometry",
    "calculator",
    "lessons",
    "teaching",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Thai",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mathlessons-addition = "mathlessons.addition:main"
mathlessons-subtraction = "mathlessons.subtraction:main"
mathlessons-multiplication = "mathlessons.multiplication:main"
mathlessons-division = "mathlessons.division:main"
mathlessons-shopping = "mathlessons.shopping:main"
mathlessons-geometry = "mathlessons.geometry:main"
mathlessons-validation = "mathlessons.validation:main"
mathlessons-calculator = "mathlessons.calculator:main"

[tool.hatch.build.targets.wheel]
packages = ["mathlessons"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"
