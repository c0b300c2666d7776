[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tankwars"
version = "0.1.0"
description = "A two-player artillery game on deformable terrain"
requires-python = ">=3.10"
keywords = ["game", "artillery", "tanks", "pygame", "2d"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]
dependencies = [
    "numpy",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tankwars = "tankwars.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tankwars"]

[tool.pytest.ini_options]
addopts = "-ra"
