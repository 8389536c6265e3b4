[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blackgreeks"
version = "0.1.0"
description = "Black-model option pricing and Greeks for option chain quotes read from semicolon-separated files"
requires-python = ">=3.10"
dependencies = []
keywords = ["options", "black-76", "greeks", "pricing", "finance", "option-chain"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Financial and Insurance Industry",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["blackgreeks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
