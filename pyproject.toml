[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algoritmos-eda"
version = "0.1.0"
description = "Graph, priority-queue and greedy algorithms, with solvers for classic judge problems"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data structures",
    "graphs",
    "dijkstra",
    "kruskal",
    "union-find",
    "priority queue",
    "heapsort",
    "greedy",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algoritmos-eda = "algoritmos_eda.problemas:main"

[tool.hatch.build.targets.wheel]
packages = ["algoritmos_eda"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
