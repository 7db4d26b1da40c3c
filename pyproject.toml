[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bistro"
version = "0.1.0"
description = "A small restaurant menu, special-offer and ordering system with admin and client roles"
requires-python = ">=3.10"
dependencies = []
keywords = ["restaurant", "menu", "point-of-sale", "ordering", "cart"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bistro = "bistro.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bistro"]

[tool.pytest.ini_options]
addopts = "-ra"
