[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gcpinfra"
version = "0.1.0"
description = "Data model for GCP cluster infrastructure resources: v1alpha4 clusters, cluster templates, machines and machine templates, shared network types, label helpers and dict serialisation."
requires-python = ">=3.10"
dependencies = []
keywords = ["gcp", "kubernetes", "cluster-api", "infrastructure", "labels"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Clustering",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gcpinfra"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
