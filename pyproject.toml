[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zentype"
version = "0.1.0a1"
description = "Text rendering core: colors, text options, shaped buffers with hit-testing, glyph atlases and glyph-instance batching"
requires-python = ">=3.10"
dependencies = []
keywords = ["text", "rendering", "typography", "glyph", "atlas", "layout", "hit-testing"]
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
    "Topic :: Text Processing :: Fonts",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zentype"]

[tool.pytest.ini_options]
addopts = "-ra"
