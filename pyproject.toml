[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpblobs"
version = "1.0.0"
description = "Metaball screensaver scene: marching-cubes isosurfaces, animated blobs and XML settings"
requires-python = ">=3.10"
dependencies = []
keywords = ["metaballs", "marching cubes", "isosurface", "screensaver", "blobs"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: Screen Savers",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cpblobs"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
