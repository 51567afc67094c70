[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "designlab"
version = "0.1.0"
description = "Small worked examples of object-oriented designs: a peer-to-peer delivery service, a bidding sketch, and logger and network factories"
requires-python = ">=3.10"
dependencies = []
keywords = ["design patterns", "factory method", "abstract factory", "delivery", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
designlab-delivery = "designlab.delivery_demo:main"
designlab-bidding = "designlab.bidding:main"
designlab-loggers = "designlab.loggers:main"
designlab-network = "designlab.network:main"

[tool.hatch.build.targets.wheel]
packages = ["designlab"]

[tool.pytest.ini_options]
addopts = "-ra"
