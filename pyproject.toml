[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "formantsay"
version = "0.1.0"
description = "Formant speech synthesis building blocks: letter-to-sound rules, a character trie, a cascade/parallel formant synthesiser and mu-law audio coding"
requires-python = ">=3.10"
dependencies = []
keywords = ["speech", "synthesis", "formant", "text-to-speech", "mu-law", "phonemes"]
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
    "Topic :: Multimedia :: Sound/Audio :: Speech",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["formantsay"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
