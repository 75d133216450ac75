[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "openzt"
version = "0.1.0"
description = "Zoo Tycoon file-format tools: INI-style configuration parsing, ZTAF animation parsing and a command console client."
requires-python = ">=3.10"
dependencies = []
keywords = ["zoo tycoon", "ini", "configparser", "animation", "ztaf", "modding"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: File Formats",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
openzt-console = "openzt.console:main"

[tool.hatch.build.targets.wheel]
packages = ["openzt"]

[tool.hatch.build.targets.sdist]
include = ["openzt", "tests", "README.md", "pyproject.toml"]

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
warn_unused_ignores = true
warn_redundant_casts = true
