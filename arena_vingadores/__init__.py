"""Simulador de combate por rodadas entre duas equipes de heróis armados."""

__version__ = "0.1.0"