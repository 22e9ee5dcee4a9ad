[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordtree"
version = "0.1.0"
description = "Inverted word index over numbered text documents, held in a plain binary search tree or an AVL tree"
requires-python = ">=3.10"
dependencies = []
keywords = ["inverted index", "binary search tree", "avl tree", "indexing", "search"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Indexing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wordtree-bst = "wordtree.cli:main_bst"
wordtree-avl = "wordtree.cli:main_avl"

[tool.hatch.build.targets.wheel]
packages = ["wordtree"]

[tool.pytest.ini_options]
addopts = "-ra"
