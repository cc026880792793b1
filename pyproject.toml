[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rasterlab"
version = "0.1.0"
description = "Small computer-graphics building blocks: Netpbm images, line rasterization, regular polygons, vector shapes, scene locators and vertex layouts."
requires-python = ">=3.10"
keywords = [
    "graphics",
    "rasterization",
    "bresenham",
    "dda",
    "netpbm",
    "pbm",
    "pgm",
    "ppm",
    "polygon",
    "vertex-buffer",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Education",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
rasterlab-netpbm = "rasterlab.netpbm:main"

[tool.hatch.build.targets.wheel]
packages = ["rasterlab"]

[tool.hatch.build.targets.sdist]
include = [
    "rasterlab",
    "tests",
    "pyproject.toml",
]

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
warn_redundant_casts = true
