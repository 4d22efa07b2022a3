[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "tsecrawl"
version = "0.1.0"
description = "A small web crawler toolkit: queue, hash table, URL normalisation, page parsing and trapezoidal integration"
requires-python = ">=3.10"
dependencies = []
keywords = ["crawler", "web", "url", "normalization", "hash table", "queue", "search engine", "integration"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Indexing/Search",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tsecrawl-crawl = "tsecrawl.crawler:main"
tsecrawl-integrate = "tsecrawl.integrate:main"

[tool.setuptools.packages.find]
include = ["tsecrawl*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
