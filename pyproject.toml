[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ftping"
version = "0.1.0"
description = "A small ICMP echo (ping) tool with string, memory, formatting and line-reading helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["ping", "icmp", "network", "monitoring", "raw socket", "checksum"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ftping = "ftping.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ftping"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
