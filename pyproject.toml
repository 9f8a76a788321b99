[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "accessmatch"
version = "0.1.0"
description = "Helpers for access-control rule handling: eval() expression handling in matchers, model-text string utilities, string-list helpers, a periodic ticker and an error hierarchy."
requires-python = ">=3.10"
dependencies = []
keywords = ["access-control", "authorization", "policy", "matcher", "eval", "ticker"]
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
    "Topic :: Security",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["accessmatch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
