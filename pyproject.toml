[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "famicom"
version = "0.1.0"
description = "Load iNES cartridge images, map the Famicom CPU address space and disassemble 6502 code"
requires-python = ">=3.10"
dependencies = []
keywords = ["nes", "famicom", "ines", "6502", "disassembler", "emulator"]
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
    "Topic :: System :: Emulators",
    "Topic :: Software Development :: Disassemblers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
famicom = "famicom.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["famicom"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
