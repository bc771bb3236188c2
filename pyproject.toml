[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fileclassifier"
version = "0.1.0"
description = "Directory file-type statistics and previews of file groupings by type, size and modification time"
requires-python = ">=3.10"
dependencies = []
keywords = ["files", "classification", "statistics", "directory", "preview"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: File Managers",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fileclassifier = "fileclassifier.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fileclassifier"]

[tool.pytest.ini_options]
addopts = "-ra"
