[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rxserver"
version = "0.1.0"
description = "Core building blocks of an X11-compatible display server: configuration, graphics contexts, a software renderer, input state and resource registries"
requires-python = ">=3.11"
dependencies = [
    "tomli-w",
]
keywords = ["x11", "window-system", "display-server", "graphics", "renderer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: Window Managers",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["rxserver"]

[tool.pytest.ini_options]
addopts = "-ra"
