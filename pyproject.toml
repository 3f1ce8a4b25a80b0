[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wavebase"
version = "0.1.0"
description = "Low-level helpers for audio software: byte swapping, string utilities, fast PRNGs, a repeat timer and levelled logging"
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "prng", "xorshift", "xoroshiro", "byteswap", "timer", "logging"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Multimedia :: Sound/Audio",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wavebase"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
