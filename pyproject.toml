[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parallab"
version = "0.1.0"
description = "Small numerical and cipher exercises: the secant method and a keyed substitution cipher"
requires-python = ">=3.10"
dependencies = []
keywords = ["secant method", "root finding", "substitution cipher", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
parallab-secant = "parallab.secant:main"
parallab-subcipher = "parallab.subcipher:main"

[tool.hatch.build.targets.wheel]
packages = ["parallab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
