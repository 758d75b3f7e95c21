[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "maasapi"
version = "0.1.0"
description = "Helpers for reading MAAS API responses: VLANs, zones, URL parameters and URL joining."
requires-python = ">=3.10"
dependencies = []
keywords = ["maas", "api", "vlan", "zone", "deserialization", "url"]
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
packages = ["maasapi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
