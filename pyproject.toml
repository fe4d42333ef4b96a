[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sipparse"
version = "0.1.0"
description = "Lenient parser for SIP messages and their common headers"
requires-python = ">=3.10"
dependencies = []
keywords = ["sip", "voip", "parser", "telephony", "rfc3261"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Telecommunications Industry",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Communications :: Internet Phone",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sipparse"]

[tool.pytest.ini_options]
addopts = "-ra"
