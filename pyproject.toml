[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lomboktojson"
version = "1.0.2"
description = "Convert the output of Lombok's default toString() into JSON"
requires-python = ">=3.10"
dependencies = []
keywords = ["lombok", "json", "tostring", "logs", "converter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Filters",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
l2j = "lomboktojson.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["lomboktojson"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
