[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clinic"
version = "0.1.0"
description = "Terminal menu for browsing and managing football teams, players and goal statistics"
requires-python = ">=3.10"
dependencies = []
keywords = ["football", "teams", "terminal", "menu", "statistics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
clinic = "clinic.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["clinic"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
