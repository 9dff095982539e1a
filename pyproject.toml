[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patternkit"
version = "0.1.0"
description = "Small, runnable examples of the classic creational and behavioural design patterns"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "design-patterns",
    "chain-of-responsibility",
    "command",
    "state",
    "strategy",
    "template-method",
    "visitor",
    "abstract-factory",
    "builder",
    "factory-method",
    "prototype",
    "singleton",
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
    "Topic :: Software Development",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
patternkit-chain = "patternkit.chain:main"
patternkit-command = "patternkit.command:main"
patternkit-state = "patternkit.state:main"
patternkit-strategy = "patternkit.strategy:main"
patternkit-template-method = "patternkit.template_method:main"
patternkit-visitor = "patternkit.visitor:main"
patternkit-abstract-factory = "patternkit.abstract_factory:main"
patternkit-builder = "patternkit.builder:main"
patternkit-factory-method = "patternkit.factory_method:main"
patternkit-prototype = "patternkit.prototype:main"
patternkit-singleton = "patternkit.singleton:main"

[tool.hatch.build.targets.wheel]
packages = ["patternkit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
