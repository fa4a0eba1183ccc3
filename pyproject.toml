[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gradecalc"
version = "0.1.0"
description = "Interactive terminal grade calculator for tracking course assessments and target grades"
requires-python = ">=3.10"
dependencies = []
keywords = ["grades", "students", "courses", "assessments", "calculator"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gradecalc = "gradecalc.app:main"

[tool.hatch.build.targets.wheel]
packages = ["gradecalc"]

[tool.pytest.ini_options]
addopts = "-ra"
