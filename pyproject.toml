[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "gophcurses"
version = "2.3.1"
description = "Curses line editing, dialogs and Gopher+ ASK forms for a Gopher client"
requires-python = ">=3.10"
dependencies = []
keywords = ["gopher", "curses", "terminal", "forms", "dialogs", "ask"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["gophcurses*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
