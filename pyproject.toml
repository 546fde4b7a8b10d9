[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lggram"
version = "0.7.1"
description = "Read and change the extra kernel features of LG Gram laptops"
requires-python = ">=3.10"
dependencies = []
keywords = ["lg", "gram", "laptop", "battery", "fn-lock", "sysfs", "systemd", "pkexec"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
lg-gram-writer = "lggram.writer:main"
lg-gram-settings = "lggram.app:main"

[tool.hatch.build.targets.wheel]
packages = ["lggram"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
