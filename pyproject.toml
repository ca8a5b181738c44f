[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "starkcore"
version = "0.1.0"
description = "Building blocks for multi-matrix STARK proving: BabyBear field arithmetic, polynomials, sum-check, key and proof structures, and a prover coordinator."
requires-python = ">=3.10"
dependencies = []
keywords = ["stark", "zero-knowledge", "sumcheck", "polynomial", "proof-system", "babybear"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["starkcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
