[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gopl"
version = "0.1.0"
description = "Small command-line tools and libraries: text filters, converters, HTML and web helpers, deep equality, images and bzip2 compression."
requires-python = ">=3.10"
keywords = [
    "text-processing",
    "html",
    "fractals",
    "bzip2",
    "wsgi",
    "command-line",
]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Utilities",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gopl-dup = "gopl.dup:main"
gopl-echo = "gopl.echo:main"
gopl-cf = "gopl.tempconv:main"
gopl-basename = "gopl.strutil:basename_main"
gopl-comma = "gopl.strutil:comma_main"
gopl-rev = "gopl.slices:rev_main"
gopl-graph = "gopl.graph:main"
gopl-charcount = "gopl.charcount:charcount_main"
gopl-dedup = "gopl.charcount:dedup_main"
gopl-movie = "gopl.movie:main"
gopl-netflag = "gopl.netflag:main"
gopl-findlinks = "gopl.htmltree:findlinks_main"
gopl-outline = "gopl.htmltree:outline_main"
gopl-fetch = "gopl.web:fetch_main"
gopl-fetchall = "gopl.web:fetchall_main"
gopl-crawl = "gopl.web:crawl_main"
gopl-title = "gopl.web:title_main"
gopl-issues = "gopl.github:main"
gopl-server = "gopl.servers:main"
gopl-surface = "gopl.surface:main"
gopl-lissajous = "gopl.lissajous:main"
gopl-mandelbrot = "gopl.fractal:main"
gopl-jpeg = "gopl.fractal:jpeg_main"
gopl-bzipper = "gopl.bzip:main"

[tool.hatch.build.targets.wheel]
packages = ["gopl"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
