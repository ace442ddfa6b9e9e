[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meta-signals-gateway"
version = "1.0.0"
description = "Turn page, track and user analytics events into Meta Conversions API requests routed through a signals gateway"
requires-python = ">=3.10"
dependencies = []
keywords = ["meta", "conversions-api", "capi", "analytics", "tracking", "pixel"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Internet :: WWW/HTTP",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["meta_signals_gateway"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
