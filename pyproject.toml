[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mtrcheck"
version = "0.1.0"
description = "Check a MySQL test-run suite directory for unknown, empty or inconsistent test case files"
requires-python = ">=3.10"
dependencies = []
keywords = ["mysql", "mtr", "test-suite", "lint", "checker"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mtrcheck = "mtrcheck.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mtrcheck"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
