[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "dskit"
version = "0.1.0"
description = "Small classic data structures (array list, sorted linked list, stack) and the programs built on them"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "stack",
    "linked-list",
    "array-list",
    "rpn",
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dskit-messages = "dskit.messages:main"
dskit-max = "dskit.maxval:main"
dskit-widget = "dskit.widget:main"
dskit-stack = "dskit.stack:main"
dskit-alist = "dskit.alist:main"
dskit-dyad = "dskit.dyad:main"
dskit-sorted-list = "dskit.sorted_list:main"
dskit-rpn = "dskit.rpn:main"

[tool.setuptools]
packages = ["dskit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
