[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bejdecode"
version = "0.1.0"
description = "Decode BEJ (Binary Encoded JSON) files into JSON text using a tag dictionary"
requires-python = ">=3.10"
dependencies = []
keywords = ["bej", "json", "binary", "decoder"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: File Formats :: JSON",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bejdecode = "bejdecode.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bejdecode"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
