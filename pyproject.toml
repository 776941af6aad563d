[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hotelbooking"
version = "0.1.0"
description = "Hotel booking services: loyalty and reservation HTTP APIs, payment storage, and shared building blocks such as a circuit breaker and a SQL builder"
requires-python = ">=3.11"
keywords = [
    "hotel",
    "booking",
    "reservation",
    "loyalty",
    "microservices",
    "circuit-breaker",
    "flask",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Typing :: Typed",
]
dependencies = [
    "flask>=2.3",
    "pyyaml>=6.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.4",
    "responses>=0.24",
]

[project.scripts]
hotelbooking-loyalty = "hotelbooking.loyalty.app:main"
hotelbooking-reservation = "hotelbooking.reservation.app:main"

[tool.hatch.build.targets.wheel]
packages = ["hotelbooking"]

[tool.hatch.build.targets.sdist]
include = ["hotelbooking", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
warn_redundant_casts = true
