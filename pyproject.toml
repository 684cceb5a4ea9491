[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "embutil"
version = "0.1.0"
description = "Small utilities for byte strings, buffers, varints, C-style formatting, glob matching, logging and a plain HTTP GET client"
requires-python = ">=3.10"
dependencies = []
keywords = ["varint", "leb128", "buffer", "glob", "snprintf", "logging", "timegm", "http"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
embutil-get = "embutil.httpget:main"

[tool.hatch.build.targets.wheel]
packages = ["embutil"]

[tool.pytest.ini_options]
addopts = "-ra"
