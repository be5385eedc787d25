[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xarm"
version = "0.1.0"
description = "ARM64 register state, 128-bit integer arithmetic, instruction mnemonics and syscall numbers"
requires-python = ">=3.10"
dependencies = []
keywords = ["arm64", "aarch64", "emulator", "registers", "syscalls", "uint128"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xarm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
