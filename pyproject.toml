[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "news_reporter"
version = "0.1.0"
description = "Search the web for the latest news through the OpenAI Responses API, with spoken summaries"
requires-python = ">=3.10"
keywords = ["news", "search", "openai", "web-search", "tts", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Japanese",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Indexing/Search",
    "Topic :: Multimedia :: Sound/Audio :: Speech",
]
dependencies = [
    "requests>=2.28",
    "python-dotenv>=1.0",
    "pygame>=2.1",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "responses>=0.23",
]

[project.scripts]
news-reporter = "news_reporter.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["news_reporter"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
