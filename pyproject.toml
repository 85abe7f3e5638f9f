[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "subchat"
version = "0.1.0"
description = "Turn chat logs in CSV form into YouTube timed-text (YTT/SRV3) and ASS subtitles"
requires-python = ">=3.10"
dependencies = []
keywords = ["subtitles", "chat", "ytt", "srv3", "ass", "youtube"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Video :: Conversion",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
subtitles-generator = "subchat.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["subchat"]

[tool.pytest.ini_options]
addopts = "-ra"
