[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "treekit"
version = "0.1.0"
description = "Small tree data structures: general, binary, binary search, red-black and Huffman trees"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "tree",
    "binary-tree",
    "binary-search-tree",
    "red-black-tree",
    "huffman",
    "traversal",
    "data-structures",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
treekit-tree = "treekit.tree:main"
treekit-binary-tree = "treekit.binary_tree:main"
treekit-bst = "treekit.binary_search_tree:main"
treekit-huffman = "treekit.huffman_tree:main"
treekit-traversal = "treekit.traversal_tree:main"
treekit-red-black-check = "treekit.red_black_check:main"

[tool.hatch.build.targets.wheel]
packages = ["treekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
