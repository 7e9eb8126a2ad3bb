"""Characters that fight in the arena."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from arena_vingadores.armas import ArmaAtaque, ArmaDefesa

__all__ = [
    "Personagem",
    "CapitaoAmerica",
    "Chaves",
    "HomemFerro",
    "Hulk",
    "Thor",
    "ViuvaNegra",
]


@dataclass(eq=False)
class Personagem(ABC):
    """A fighter with life points, an attack weapon and defensive gear."""

    id: int
    nome: str
    vida: int
    arma_ataque: ArmaAtaque
    arma_defesa: ArmaDefesa

    def gerar_ataque(self) -> int:
        """Return the force of an attack with the character's weapon."""
        return self.arma_ataque.gerar_forca_ataque()

    def criar_defesa(self) -> int:
        """Return the resistance of the character's gear."""
        return self.arma_defesa.resistencia

    @abstractmethod
    def pegar_descricao(self) -> str:
        """Return the character's catchphrase."""


class CapitaoAmerica(Personagem):
    def pegar_descricao(self) -> str:
        return "Vingadores, unidos!"


class Chaves(Personagem):
    def pegar_descricao(self) -> str:
        return "Eii, não contava com a minha astucia?"


class HomemFerro(Personagem):
    def pegar_descricao(self) -> str:
        return "Se não pudermos proteger a Terra, pode ter certeza que iremos vingá-la."


class Hulk(Personagem):
    def pegar_descricao(self) -> str:
        return "Hulk esmagaaaa!!!!"


class Thor(Personagem):
    def pegar_descricao(self) -> str:
        return "Traga-me o Thanos!"


class ViuvaNegra(Personagem):
    def pegar_descricao(self) -> str:
        return (
            "Não disse que deveríamos ir embora. Há formas piores de morrer. "
            "Onde mais conseguiria uma vista assim?”"
        )