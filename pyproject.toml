[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mazecaster"
version = "0.1.0"
description = "A small first-person maze raycaster game with enemies, levels and menus"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["raycaster", "maze", "game", "pygame", "first-person"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
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

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mazecaster = "mazecaster.app:main"

[tool.hatch.build.targets.wheel]
packages = ["mazecaster"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
