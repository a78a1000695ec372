[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "panekit"
version = "0.1.0"
description = "Layout algorithms, focus handling and object-tree walking for retained-mode user interfaces"
requires-python = ">=3.10"
dependencies = []
keywords = ["gui", "layout", "widgets", "focus", "user-interface"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
panekit-modvendor = "panekit.modvendor:main"

[tool.hatch.build.targets.wheel]
packages = ["panekit"]

[tool.pytest.ini_options]
addopts = "-ra"
