[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "leddyctl"
version = "0.1.0"
description = "Drive a fish-tank LED light through a Tasmota smart plug by power-cycling it between its light modes."
requires-python = ">=3.10"
dependencies = []
keywords = ["tasmota", "aquarium", "led", "smart-plug", "home-automation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Home Automation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
leddyctl = "leddyctl.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["leddyctl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
