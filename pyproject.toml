[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "simplenotes"
version = "1.0.0"
description = "A small desktop note editor with character formatting, context toolbars and plain-text file handling"
requires-python = ">=3.10"
dependencies = []
keywords = ["notepad", "editor", "notes", "text", "tkinter", "desktop"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Environment :: MacOS X",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
simplenotes = "simplenotes.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["simplenotes"]

[tool.pytest.ini_options]
addopts = "-ra"
