[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "globmatch"
version = "0.1.0"
description = "Glob pattern matching for strings, with separators, character classes and alternatives"
requires-python = ">=3.10"
dependencies = []
keywords = ["glob", "pattern", "wildcard", "matching"]
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
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
globdraw = "globmatch.globdraw:main"
globtest = "globmatch.globtest:main"

[tool.hatch.build.targets.wheel]
packages = ["globmatch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
