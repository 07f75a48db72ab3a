[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reincarnated-ball"
version = "0.1.0"
description = "Headless simulation of a small ball-throwing arcade game: aim, charge, fire and clear each level of enemies."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "physics", "simulation", "state-machine"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
reincarnated-ball = "reincarnated_ball.game:main"

[tool.hatch.build.targets.wheel]
packages = ["reincarnated_ball"]

[tool.pytest.ini_options]
addopts = "-ra"
