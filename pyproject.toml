[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "studiobook"
version = "0.1.0"
description = "Room, equipment, booking and payment management for a music rehearsal studio"
requires-python = ">=3.10"
dependencies = []
keywords = ["music", "studio", "rehearsal", "booking", "scheduling", "rooms"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
studiobook = "studiobook.cli:main"

[tool.setuptools.packages.find]
include = ["studiobook*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
