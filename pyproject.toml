[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "c9gui"
version = "0.1.0"
description = "Element tree, flex layout, text input editing and color helpers for a small retained-mode GUI"
requires-python = ">=3.10"
dependencies = []
keywords = ["gui", "layout", "element-tree", "text-input", "gradient", "dithering"]
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
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["c9gui"]

[tool.pytest.ini_options]
addopts = "-ra"
