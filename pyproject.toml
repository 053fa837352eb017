[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labkit"
version = "0.1.0"
description = "Systems-course lab tools: bit puzzles and their checker, float/int inspectors, a cache simulator and small containers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bit manipulation",
    "two's complement",
    "ieee 754",
    "cache simulator",
    "lru",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labkit-fshow = "labkit.numshow:fshow_main"
labkit-ishow = "labkit.numshow:ishow_main"
labkit-btest = "labkit.btest:main"
labkit-csim = "labkit.cachesim:main"
labkit-add = "labkit.bootcamp:add_main"

[tool.hatch.build.targets.wheel]
packages = ["labkit"]

[tool.hatch.build.targets.sdist]
include = ["labkit", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
