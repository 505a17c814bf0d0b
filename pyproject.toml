[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tvsc"
version = "0.1.0"
description = "Fragment framing, a half-duplex radio interface, a simulated radio and small support utilities for amateur radio links."
requires-python = ">=3.10"
dependencies = []
keywords = ["radio", "ham radio", "half-duplex", "fragment", "transceiver", "simulation"]
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
    "Topic :: Communications :: Ham Radio",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tvsc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
