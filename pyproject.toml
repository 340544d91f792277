[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minilib"
version = "0.1.0"
description = "Small string, memory and output helpers, a tiny printf, a chunked line reader, a signal messenger and a two-stack sorter"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "strings",
    "printf",
    "line-reader",
    "signals",
    "push-swap",
    "sorting",
    "radix-sort",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
push-swap = "minilib.solver:main"
minitalk-client = "minilib.talk:client_main"
minitalk-server = "minilib.talk:server_main"

[tool.hatch.build.targets.wheel]
packages = ["minilib"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
