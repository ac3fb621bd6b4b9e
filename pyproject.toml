[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arcanum"
version = "0.1.0"
description = "Chess engine building blocks: bit operations, pawn bitboards, move encoding, Zobrist hashing, UCI options and time allocation."
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "engine", "bitboard", "zobrist", "uci"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["arcanum"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
