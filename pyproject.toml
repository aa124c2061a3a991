[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hookfish"
version = "0.1.0"
description = "Game logic for a pond fishing arcade game: high scores, rain, menus, pause timing and the medium-mode fish pond."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "fishing", "high-scores", "simulation"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hookfish"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
