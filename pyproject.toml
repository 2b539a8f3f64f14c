[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ftcontainers"
version = "0.1.0"
description = "Double-ended queue with stack, queue and priority-queue adaptors and cursor positions"
requires-python = ">=3.10"
dependencies = []
keywords = ["containers", "deque", "stack", "queue", "priority queue", "heap", "cursor"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ftcontainers-demo = "ftcontainers.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ftcontainers"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
