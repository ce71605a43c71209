[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spedi"
version = "0.1.0"
description = "Control-flow graph and call-graph structures for speculatively disassembled ARM/Thumb code sections"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "disassembly",
    "disassembler",
    "arm",
    "thumb",
    "control-flow-graph",
    "call-graph",
    "binary-analysis",
    "dwarf",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Disassemblers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["spedi"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
