[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "remora"
version = "2.0.0"
description = "Motion-control controller core: data frames, timer-driven threads, I/O modules and a host-link state machine"
requires-python = ">=3.10"
dependencies = []
keywords = ["cnc", "stepgen", "step-generator", "sigma-delta", "thermistor", "motion-control", "embedded"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Manufacturing",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["remora"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
