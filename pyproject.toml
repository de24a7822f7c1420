[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "siegekit"
version = "0.1.0"
description = "Building blocks for an HTTP load tester: dates, cookies, a logical cache, run statistics, URL files and a worker pool"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "load-testing", "benchmark", "cookies", "cache", "thread-pool"]
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
    "Topic :: Software Development :: Testing :: Traffic Generation",
    "Topic :: Internet :: WWW/HTTP",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["siegekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
