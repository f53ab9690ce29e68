[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slamcore"
version = "0.1.0"
description = "Engine building blocks: typed events, a resource state machine, an entity-component scene and YAML scene files"
requires-python = ">=3.10"
keywords = ["game engine", "ecs", "entity component system", "events", "scene", "yaml"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]
dependencies = [
    "numpy",
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["slamcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
