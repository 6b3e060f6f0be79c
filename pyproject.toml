[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "credhubcli"
version = "0.1.0"
description = "Client library for the CredHub credential management API"
requires-python = ">=3.10"
keywords = ["credhub", "credentials", "secrets", "api-client", "permissions"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
]
dependencies = [
    "requests",
    "packaging",
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["credhubcli"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
