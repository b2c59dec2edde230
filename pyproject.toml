[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "quadsim"
version = "0.1.0"
description = "Headless game simulations: tile-based platformer physics, particle emitters and small classic games"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "physics", "platformer", "particles", "simulation", "game-of-life", "snake", "asteroids"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["quadsim*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
