[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skyroster"
version = "0.1.0"
description = "Flight and passenger booking roster with a terminal menu, plus small integer-array, rotation and linked-list utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["flights", "booking", "passengers", "roster", "linked-list", "rotation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
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

[project.scripts]
skyroster = "skyroster.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["skyroster"]

[tool.pytest.ini_options]
addopts = "-ra"
