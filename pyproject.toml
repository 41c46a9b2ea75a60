[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "framegui"
version = "0.1.0"
description = "A small widget toolkit that renders windows, text, bitmaps and waveforms into in-memory frame buffers"
requires-python = ">=3.10"
dependencies = []
keywords = ["gui", "framebuffer", "widgets", "embedded", "rgb565", "waveform"]
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
    "Topic :: Software Development :: Widget Sets",
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["framegui"]

[tool.pytest.ini_options]
addopts = "-ra"
