[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minipromptgpt"
version = "0.1.0"
description = "A small local question-and-answer assistant backed by a JSON file of prompts"
requires-python = ">=3.10"
dependencies = []
keywords = ["chat", "prompts", "assistant", "json", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: French",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minipromptgpt = "minipromptgpt.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["minipromptgpt"]

[tool.pytest.ini_options]
addopts = "-ra"
