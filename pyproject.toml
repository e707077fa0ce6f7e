[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "furyrgb"
version = "0.2.0"
description = "Control the RGB lights on Kingston Fury Renegade RAM over the Linux I2C bus"
requires-python = ">=3.10"
dependencies = []
keywords = ["rgb", "ram", "i2c", "smbus", "kingston", "fury", "lighting"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
furyrgb = "furyrgb.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["furyrgb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
