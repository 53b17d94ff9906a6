[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "framechat"
version = "0.1.0"
description = "Length-prefixed JSON chat framing, task runner and terminal chat client"
requires-python = ">=3.10"
dependencies = []
keywords = ["chat", "client", "tcp", "json", "framing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
framechat-client = "framechat.client:main"

[tool.hatch.build.targets.wheel]
packages = ["framechat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
