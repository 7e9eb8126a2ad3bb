[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arena-vingadores"
version = "0.1.0"
description = "Simulador de combate por rodadas entre duas equipes de heróis com armas de ataque e de defesa"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulador", "combate", "jogo", "herois", "equipes"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
arena-vingadores = "arena_vingadores.principal:main"

[tool.hatch.build.targets.wheel]
packages = ["arena_vingadores"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
