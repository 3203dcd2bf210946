[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "suffixkit"
version = "0.1.0"
description = "Ukkonen suffix trees, repeated-prefix search and small terminal text effects"
requires-python = ">=3.10"
dependencies = []
keywords = ["suffix tree", "ukkonen", "string search", "substring", "prefix"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
suffixkit-prefix = "suffixkit.prefix:main"
suffixkit-loading = "suffixkit.animations:loading_main"
suffixkit-vaporwave = "suffixkit.animations:vaporwave_main"

[tool.hatch.build.targets.wheel]
packages = ["suffixkit"]

[tool.pytest.ini_options]
addopts = "-ra"
