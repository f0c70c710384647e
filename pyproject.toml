[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lessonengine"
version = "0.1.0"
description = "A small pygame engine with paged menus, a sprite player, parallax backgrounds, enemies and bullets"
requires-python = ">=3.10"
keywords = ["game", "engine", "sprites", "parallax", "pygame", "menu"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame>=2.0",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
lessonengine = "lessonengine.app:main"

[tool.hatch.build.targets.wheel]
packages = ["lessonengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
