[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minxtra"
version = "0.1.0"
description = "Small utilities: UTF-8/UTF-16 transcoding, ANSI console colours, call stack traces and traceable exceptions"
requires-python = ">=3.10"
dependencies = []
keywords = ["utf-8", "utf-16", "unicode", "stack trace", "exceptions", "ansi colors"]
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
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["minxtra"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
