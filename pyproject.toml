[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "huffpress"
version = "0.1.0"
description = "Huffman coding compressor and decompressor with a plain-text code file"
requires-python = ">=3.10"
dependencies = []
keywords = ["huffman", "compression", "bitstream", "entropy-coding"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: System :: Archiving :: Compression",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
huffpress = "huffpress.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["huffpress"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
