[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reactorecho"
version = "0.1.0"
description = "A small reactor-pattern TCP echo server and interactive client built on selectors."
requires-python = ">=3.10"
dependencies = []
keywords = ["reactor", "echo", "tcp", "selectors", "event-loop", "networking"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
reactorecho-server = "reactorecho.server:main"
reactorecho-client = "reactorecho.client:main"

[tool.hatch.build.targets.wheel]
packages = ["reactorecho"]

[tool.pytest.ini_options]
addopts = "-ra"
