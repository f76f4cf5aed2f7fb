[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chromakit"
version = "1.5.1"
description = "Building blocks for audio fingerprinting: fingerprint encoding, bit packing, filters and integral images"
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "fingerprint", "base64", "simhash", "integral image", "signal processing"]
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
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["chromakit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
