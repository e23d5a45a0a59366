[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinytools"
version = "0.1.0"
description = "A handful of small learning tools: ASCII letter art, image-to-ASCII conversion, a palindrome finder, quizzes and a tiny chat server."
requires-python = ">=3.10"
keywords = ["ascii-art", "quiz", "palindrome", "learning", "chat"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]
dependencies = [
    "pillow",
    "flask",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tinytools-asciifont = "tinytools.asciifont:main"
tinytools-mocknumber = "tinytools.mocknumber:main"
tinytools-palindrome = "tinytools.palindrome:main"
tinytools-htmlfile = "tinytools.htmlfile:main"
tinytools-imgascii = "tinytools.imgascii:main"
tinytools-chatserver = "tinytools.chatserver:main"
tinytools-quiz = "tinytools.quiz:main"
tinytools-notes = "tinytools.notes:main"

[tool.hatch.build.targets.wheel]
packages = ["tinytools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
