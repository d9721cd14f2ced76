[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "commontypes"
version = "0.1.0"
description = "Self-validating value types for common data such as e-mail addresses and phone numbers"
requires-python = ">=3.10"
dependencies = []
keywords = ["validation", "value-objects", "email", "phone", "types"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["commontypes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
