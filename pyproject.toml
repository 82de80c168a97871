[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "banksystem"
version = "0.1.0"
description = "A small bank ledger: user accounts, deposits, withdrawals and transfers stored in a CSV file"
requires-python = ">=3.10"
dependencies = []
keywords = ["bank", "ledger", "accounts", "balance", "csv"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Natural Language :: Russian",
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
bank = "banksystem.cli:main"
bank-shell = "banksystem.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["banksystem"]

[tool.pytest.ini_options]
addopts = "-ra"
