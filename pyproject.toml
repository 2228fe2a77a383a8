[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "feap"
version = "0.1.0"
description = "Core building blocks of an entity-component-system: interning, change ticks, entities, component metadata, messages and errors."
requires-python = ">=3.10"
dependencies = []
keywords = ["ecs", "entity-component-system", "change-detection", "interning", "game-engine"]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["feap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
