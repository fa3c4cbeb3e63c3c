[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "synthie"
version = "0.1.0"
description = "A small score-driven software synthesizer that renders XML scores to WAVE files"
requires-python = ">=3.10"
dependencies = []
keywords = ["synthesizer", "audio", "music", "wave", "score", "reverb", "chorus", "karplus-strong"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
synthie = "synthie.cli:main"

[tool.setuptools.packages.find]
include = ["synthie*"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
