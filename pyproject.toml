[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "failwrap"
version = "0.1.0"
description = "Declare HTTP statuses on exception classes and turn raised errors into responses or HTTP errors."
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "errors", "exceptions", "status", "response", "web"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["failwrap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
