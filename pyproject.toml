[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "notifyd"
version = "1.4.0"
description = "Configuration, shortcut, screen and layout logic for a lightweight desktop notification daemon"
requires-python = ">=3.10"
dependencies = []
keywords = ["notifications", "desktop", "dunstrc", "configuration", "x11"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["notifyd"]

[tool.pytest.ini_options]
addopts = "-ra"
