[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quoridor"
version = "0.1.0"
description = "Quoridor on a 9x9 board against a minimax opponent, with a pygame window and a text view"
requires-python = ">=3.10"
keywords = ["quoridor", "board game", "minimax", "alpha-beta", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
quoridor = "quoridor.game:main"

[tool.hatch.build.targets.wheel]
packages = ["quoridor"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
