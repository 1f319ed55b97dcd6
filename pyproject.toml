[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jokerkit"
version = "0.1.0"
description = "Kernel building blocks as plain Python: bitmaps, ring buffers, linked lists, C-style strings and formatting, calendar time, keyboard scan-code decoding and an 8259 PIC model."
requires-python = ">=3.10"
dependencies = []
keywords = ["kernel", "bitmap", "fifo", "linked-list", "scancode", "pic", "sprintf", "bcd", "rtc"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Operating System Kernels",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jokerkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
