[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ustr"
version = "1.0.0"
description = "Universal conversion of Python values to readable strings, with quoting and per-type formatters"
requires-python = ">=3.10"
dependencies = []
keywords = ["string", "conversion", "formatting", "quoting", "escaping", "pretty-print"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ustr-demo = "ustr.demo:main"
ustr-multi-module-demo = "ustr.modules:main"

[tool.hatch.build.targets.wheel]
packages = ["ustr"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
