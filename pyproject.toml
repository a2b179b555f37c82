[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parbench"
version = "0.1.0"
description = "Small benchmarks comparing sequential and process-parallel array sums, sorts and element-wise arithmetic"
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "parallel", "multiprocessing", "bubble sort", "array"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
parbench-sum = "parbench.array_sum:main"
parbench-sort = "parbench.bubble:main"
parbench-elementwise = "parbench.elementwise:main"
parbench-matrix = "parbench.matrix_ops:main"

[tool.hatch.build.targets.wheel]
packages = ["parbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
