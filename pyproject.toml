[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "refdoc"
version = "0.1.0"
description = "Symbol metadata model for C and C++ code with XML and Asciidoc reference generators"
requires-python = ">=3.10"
dependencies = []
keywords = ["documentation", "reference", "asciidoc", "xml", "javadoc", "c++"]
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
    "Topic :: Software Development :: Documentation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["refdoc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
