[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "roomchat"
version = "0.1.0"
description = "Console client and in-memory server-side state for a small room-based chat over HTTP and WebSocket"
requires-python = ">=3.10"
dependencies = [
    "requests",
    "websocket-client",
]
keywords = ["chat", "rooms", "websocket", "rest", "client", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
roomchat = "roomchat.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["roomchat"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
