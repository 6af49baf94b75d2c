[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cleanapi"
version = "0.1.0"
description = "A small layered WSGI API for registering and removing users, with a health check and configuration from the environment."
requires-python = ">=3.10"
keywords = ["wsgi", "api", "werkzeug", "clean-architecture", "users"]
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
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
]
dependencies = [
    "werkzeug",
    "python-dotenv",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cleanapi = "cleanapi.main:main"

[tool.hatch.build.targets.wheel]
packages = ["cleanapi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
