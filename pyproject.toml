[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "budgetbook"
version = "0.1.0"
description = "A home budget tracker: record income and expenses, filter them, undo and redo changes, and keep them in JSON or CSV files."
requires-python = ">=3.10"
dependencies = []
keywords = ["budget", "finance", "expenses", "income", "transactions", "undo", "csv", "json"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
budgetbook = "budgetbook.app:main"

[tool.hatch.build.targets.wheel]
packages = ["budgetbook"]

[tool.hatch.build.targets.sdist]
include = ["budgetbook", "tests", "README.md", "pyproject.toml"]

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
