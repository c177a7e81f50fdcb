[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blogdesk"
version = "0.1.0"
description = "A desktop-style workspace for generating blog posts from uploaded files and viewing them as rendered Markdown"
requires-python = ">=3.10"
keywords = ["blog", "markdown", "desktop", "windows", "upload"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content :: News/Diary",
    "Topic :: Text Processing :: Markup :: Markdown",
]
dependencies = [
    "requests>=2.28",
    "markdown-it-py>=3.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "responses>=0.23",
]

[project.scripts]
blogdesk = "blogdesk.desktop:main"

[tool.hatch.build.targets.wheel]
packages = ["blogdesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
