[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mgui"
version = "0.1.0"
description = "Small widget set (buttons, sliders, scroll bars, list views, dialog boxes) drawn with pygame, with a state-stack demo application"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["gui", "widgets", "pygame", "listview", "slider", "scrollbar", "dialog"]
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
    "Topic :: Software Development :: Widget Sets",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mgui = "mgui.game:main"

[tool.hatch.build.targets.wheel]
packages = ["mgui"]

[tool.pytest.ini_options]
addopts = "-ra"
