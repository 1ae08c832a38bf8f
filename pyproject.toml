[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vksync"
version = "0.1.6"
description = "Simplification of core Vulkan synchronization mechanisms such as pipeline barriers and events."
requires-python = ">=3.10"
dependencies = []
keywords = ["vulkan", "vk", "graphics", "3d", "synchronization", "barriers"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vksync"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
