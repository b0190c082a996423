[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "purecrypt"
version = "0.1.0"
description = "Pure-Python Threefish, Skein, BLAKE, JH, Groestl and ChaCha primitives"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cryptography",
    "hash",
    "skein",
    "threefish",
    "blake",
    "jh",
    "groestl",
    "chacha",
    "xchacha",
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["purecrypt"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
