[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slidetiles"
version = "0.1.0"
description = "A 5x5 sliding tile puzzle whose tiles show pieces of a playing video"
requires-python = ">=3.10"
keywords = ["puzzle", "sliding-puzzle", "fifteen-puzzle", "game", "pygame", "ffmpeg"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
slidetiles = "slidetiles.game:main"

[tool.hatch.build.targets.wheel]
packages = ["slidetiles"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
