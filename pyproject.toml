[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bossarena"
version = "0.1.0"
description = "Game-object, collision and boss-attack logic for a small 3D arena game"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "collision", "aabb", "bounding-sphere", "boss", "3d"]
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
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bossarena"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
