[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shelfbox"
version = "0.4.0"
description = "Shelve repo-local files outside Git, keeping them visible in your editor"
requires-python = ">=3.10"
dependencies = []
keywords = ["git", "shelf", "store", "manifest", "untracked", "dotfiles"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Version Control :: Git",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
shelfbox = "shelfbox.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["shelfbox"]

[tool.pytest.ini_options]
addopts = "-ra"
