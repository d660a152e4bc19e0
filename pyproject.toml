[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eventzgame"
version = "0.1.0"
description = "A small pygame window with an animated background and an XPM image reader for its icon"
requires-python = ">=3.10"
keywords = ["game", "pygame", "xpm", "pixmap", "icon"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
eventzgame = "eventzgame.game:main"

[tool.hatch.build.targets.wheel]
packages = ["eventzgame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
