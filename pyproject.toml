[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "galtonpico"
version = "0.1.0"
description = "A Galton board simulation on a 128x64 monochrome frame buffer, driven by a small cooperative task scheduler"
requires-python = ">=3.10"
dependencies = []
keywords = ["galton board", "simulation", "oled", "frame buffer", "scheduler"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
galtonpico = "galtonpico.app:main"

[tool.hatch.build.targets.wheel]
packages = ["galtonpico"]

[tool.pytest.ini_options]
addopts = "-ra"
