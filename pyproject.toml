[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drills"
version = "1.0.0"
description = "Small worked programming exercises: data structures, parsers, text widgets, concurrency and networking"
requires-python = ">=3.10"
keywords = [
    "exercises",
    "education",
    "protobuf",
    "binary-tree",
    "dining-philosophers",
    "link-checker",
    "websocket-chat",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]
dependencies = [
    "requests>=2.28",
    "beautifulsoup4>=4.11",
    "websockets>=11.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "pytest-asyncio>=0.21",
    "responses>=0.23",
]

[project.scripts]
drills-packages = "drills.packages:main"
drills-loggers = "drills.loggers:main"
drills-widgets = "drills.widgets:main"
drills-expressions = "drills.expressions:main"
drills-protobuf = "drills.protobuf:main"
drills-rot = "drills.rot:main"
drills-counter = "drills.counter:main"
drills-fibonacci = "drills.fibonacci:main"
drills-dirlist = "drills.dirlist:main"
drills-elevator = "drills.elevator:main"
drills-philosophers = "drills.philosophers:main"
drills-philosophers-async = "drills.philosophers_async:main"
drills-linkcheck = "drills.linkcheck:main"
drills-chat-server = "drills.chat_server:main"
drills-chat-client = "drills.chat_client:main"

[tool.hatch.build.targets.wheel]
packages = ["drills"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
