[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "miniredis"
version = "0.1.0"
description = "A small Redis-like key-value server with plain-text commands, plus Linux system statistics tools"
requires-python = ">=3.10"
dependencies = []
keywords = ["redis", "key-value", "tcp", "server", "procfs", "system-monitoring"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Database Engines/Servers",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
miniredis-server = "miniredis.server:main"
miniredis-cpu = "miniredis.cpu:main"
miniredis-memory = "miniredis.memory:main"
miniredis-disk = "miniredis.disk:main"
miniredis-cpuinfo = "miniredis.cpuinfo:main"
miniredis-sysinfo = "miniredis.sysinfo:main"

[tool.hatch.build.targets.wheel]
packages = ["miniredis"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
