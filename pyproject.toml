[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gostcrypt"
version = "0.1.0"
description = "Pure Python GOST primitives: Kuznyechik block cipher, GOST R 34.13 padding, GF(2^n) multiplication, MGM AEAD mode and prf+ key expansion"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "gost",
    "kuznyechik",
    "grasshopper",
    "mgm",
    "aead",
    "block cipher",
    "padding",
    "galois field",
    "prf+",
    "cryptography",
]
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
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["gostcrypt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
