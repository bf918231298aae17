[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hamburguer"
version = "0.1.0"
description = "Burger menu scraper, LLM-driven order recommendations and an Alexa-ready review service"
requires-python = ">=3.10"
keywords = ["alexa", "openai", "llm", "reviews", "scraper", "restaurant", "starlette"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Web Environment",
    "Intended Audience :: Developers",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "httpx",
    "sqlalchemy>=2.0",
    "starlette",
    "uvicorn",
    "beautifulsoup4",
]

[project.optional-dependencies]
test = [
    "pytest",
    "respx",
]

[project.scripts]
hamburguer = "hamburguer.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hamburguer"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
