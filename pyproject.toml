[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "httpc"
version = "0.1.0"
description = "A minimal blocking HTTP/1.1 server that maps a method and an exact route to a handler function"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "server", "routing", "minimal", "socket"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["httpc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
