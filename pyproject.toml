[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "estudos"
version = "0.1.0"
description = "Small study programs: bit tricks, image extraction, checksums, key derivation, zip archives, a key-value store, JSON walks, feeds, news scraping, a helper process with its launcher, random numbers and factorials."
requires-python = ">=3.10"
keywords = [
    "education",
    "examples",
    "checksum",
    "crc",
    "hkdf",
    "pbkdf2",
    "zip",
    "rss",
    "key-value",
    "subprocess",
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
    "Topic :: Utilities",
]
dependencies = [
    "cryptography",
    "beautifulsoup4",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
estudos-bits = "estudos.bits:main"
estudos-imagens = "estudos.imagens:main"
estudos-checksum = "estudos.checksum:main"
estudos-derivacao = "estudos.derivacao:main"
estudos-kvstore = "estudos.kvstore:main"
estudos-jsonwalk = "estudos.jsonwalk:main"
estudos-feeds = "estudos.feeds:main"
estudos-noticias = "estudos.noticias:main"
estudos-helper = "estudos.helper:main"
estudos-launcher = "estudos.launcher:main"
estudos-aleatorio = "estudos.aleatorio:main"
estudos-fatorial = "estudos.fatorial:main"

[tool.hatch.build.targets.wheel]
packages = ["estudos"]

[tool.hatch.build.targets.sdist]
include = ["estudos", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
