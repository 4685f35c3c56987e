[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "batonexpensify"
version = "0.1.0"
description = "Connector that syncs Expensify users, policies and policy roles into an access-review model"
requires-python = ">=3.10"
keywords = ["expensify", "identity", "access-review", "connector", "sync"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration :: Authentication/Directory",
]
dependencies = [
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
baton-expensify = "batonexpensify.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["batonexpensify"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
