[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stadiumbook"
version = "0.1.0"
description = "Football and basketball stadiums, user accounts, sessions and reviews stored in plain text files"
requires-python = ">=3.10"
dependencies = []
keywords = ["stadium", "scheduling", "reservations", "reviews", "users"]
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
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["stadiumbook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
