[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oledlab"
version = "0.1.0"
description = "Microcontroller lab exercises as plain Python: bouncing-ball physics, LED tasks, a rotating cube, touch patterns, I2C registers, OTA update checks and HTTP header parsing."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "simulation",
    "physics",
    "oled",
    "embedded",
    "ota",
    "i2c",
    "touch",
    "led",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["oledlab"]

[tool.pytest.ini_options]
addopts = "-ra"
