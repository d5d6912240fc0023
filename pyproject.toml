[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blekit"
version = "0.1.0"
description = "Bluetooth Low Energy helpers: UUIDs, GATT/GAP names, data formatting, ESP error names and HID keymaps"
requires-python = ">=3.10"
dependencies = []
keywords = ["bluetooth", "ble", "gatt", "gap", "uuid", "hid", "base64", "hexdump"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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
packages = ["blekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
