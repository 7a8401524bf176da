[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glcdpack"
version = "0.1.0"
description = "Emulator of a serial graphic LCD backpack with KS0108B and T6963 display models, plus a host-side client"
requires-python = ">=3.10"
dependencies = []
keywords = ["lcd", "glcd", "ks0108b", "t6963", "serial", "emulator", "backpack"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
glcdpack = "glcdpack.backpack:main"

[tool.hatch.build.targets.wheel]
packages = ["glcdpack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
