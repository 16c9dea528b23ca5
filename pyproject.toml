[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "racereg"
version = "0.1.0"
description = "Domain model, in-memory repositories and services for race event registration"
requires-python = ">=3.10"
dependencies = []
keywords = ["domain-driven-design", "events", "registration", "race", "repository"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["racereg"]

[tool.pytest.ini_options]
addopts = "-ra"
