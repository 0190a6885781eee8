[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "doce"
version = "0.1.0"
description = "Core pieces of the DoCe card game: cards, hands, players, powers and small containers."
requires-python = ">=3.10"
dependencies = []
keywords = ["card game", "doce", "queue", "linked list"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["doce"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
