[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pioctl"
version = "0.1.0"
description = "Switch monitor, audio sink and workspace profiles on Hyprland with PipeWire"
requires-python = ">=3.10"
keywords = ["hyprland", "pipewire", "monitors", "profiles", "workspaces", "audio"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: Window Managers",
    "Topic :: Utilities",
]
dependencies = [
    "platformdirs",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pioctl = "pioctl.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pioctl"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
