[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oaicompat"
version = "0.1.0"
description = "Request and response dataclasses, endpoint request builders, event-stream reading and JSON schema helpers for OpenAI-compatible APIs."
requires-python = ">=3.10"
dependencies = []
keywords = ["openai", "api", "json-schema", "assistants", "streaming", "server-sent-events"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["oaicompat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
