[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "pixelchase"
version = "0.1.0"
description = "A tiny chase game drawn on an in-memory 240x160 pixel frame buffer with a built-in 6x8 bitmap font"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "framebuffer", "bitmap-font", "pixel"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pixelchase = "pixelchase.app:main"

[tool.setuptools.packages.find]
include = ["pixelchase*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
