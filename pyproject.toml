[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voiceprint"
version = "0.1.0"
description = "Log mel feature extraction, embedding post-processing and matching for speaker verification"
requires-python = ">=3.10"
dependencies = []
keywords = ["speaker recognition", "voiceprint", "mel", "fft", "fixed-point", "embedding"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Speech",
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["voiceprint"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
