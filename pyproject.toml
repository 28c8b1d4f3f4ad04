[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nlscat"
version = "0.1.0"
description = "Message catalog lookup: GNU .mo files, locale name expansion, aliases and domain bindings"
requires-python = ">=3.10"
dependencies = []
keywords = ["gettext", "i18n", "l10n", "mo", "locale", "translation", "message catalog"]
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
    "Topic :: Software Development :: Internationalization",
    "Topic :: Software Development :: Localization",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nlscat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
