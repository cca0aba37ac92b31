[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "deskledger"
version = "0.1.0"
description = "Small file-backed record keepers for a bank, a student register and a hospital front desk"
requires-python = ">=3.10"
dependencies = []
keywords = ["bank", "accounts", "students", "grades", "hospital", "appointments", "records", "cli"]
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
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
deskledger-bank = "deskledger.bank:main"
deskledger-student = "deskledger.student:main"
deskledger-hospital = "deskledger.hospital:main"

[tool.hatch.build.targets.wheel]
packages = ["deskledger"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B"]

[tool.mypy]
python_version = "3.10"
