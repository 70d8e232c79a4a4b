[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pdfcanvas"
version = "0.1.0"
description = "Building blocks for PDF page content: units, paths, shapes, link annotations, layers and XObjects"
requires-python = ">=3.10"
dependencies = []
keywords = ["pdf", "vector", "graphics", "content-stream", "printing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Printing",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pdfcanvas"]

[tool.pytest.ini_options]
addopts = "-ra"
