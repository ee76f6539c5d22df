[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chirpapi"
version = "0.1.0"
description = "Request options and response models for user, follow and retweet endpoints of a social API"
requires-python = ">=3.10"
dependencies = []
keywords = ["api", "client", "users", "retweets", "followers", "query-string"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["chirpapi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
