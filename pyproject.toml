[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "exsdk"
version = "0.1.0"
description = "Client-side helpers for an ExChain-style blockchain: addresses, coins, parameter checks and token transactions"
requires-python = ">=3.10"
dependencies = []
keywords = ["blockchain", "bech32", "cosmos", "sdk", "token", "client"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["exsdk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
