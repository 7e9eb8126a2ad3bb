"""Attack and defence weapons carried by the arena characters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

__all__ = [
    "ArmaAtaque",
    "Bastao",
    "Colher",
    "Martelo",
    "Punhos",
    "Rosa",
    "SoroSuperSoldado",
    "Laser",
    "ArmaDefesa",
    "Botas",
    "Calca",
    "Capacete",
    "Colete",
    "Escudo",
    "Luvas",
]


def _div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quociente = abs(a) // abs(b)
    return quociente if (a < 0) == (b < 0) else -quociente


@dataclass
class ArmaAtaque(ABC):
    """An attack weapon with a force range."""

    descricao_arma: str
    min_forca: int
    max_forca: int

    def descricao(self) -> str:
        """Describe the weapon together with its force range."""
        return f"{self.descricao_arma}\t[{self.min_forca},{self.max_forca}]"

    @abstractmethod
    def gerar_forca_ataque(self) -> int:
        """Return the force of one attack."""

    @abstractmethod
    def gerar_ruido_ataque(self) -> str:
        """Return the sound the weapon makes when used."""


class Bastao(ArmaAtaque):
    """A staff."""

    def gerar_forca_ataque(self) -> int:
        return self.max_forca - _div(self.min_forca, 7)

    def gerar_ruido_ataque(self) -> str:
        return "ta ta ta ta "


class Colher(ArmaAtaque):
    """A spoon."""

    def gerar_forca_ataque(self) -> int:
        return self.max_forca - self.min_forca

    def gerar_ruido_ataque(self) -> str:
        return "cush cush"


class Martelo(ArmaAtaque):
    """A hammer."""

    def gerar_forca_ataque(self) -> int:
        return _div(self.max_forca + self.min_forca, 3)

    def gerar_ruido_ataque(self) -> str:
        return " Quem segura este martelo, se for digno, possuirá o poder de Thor"


class Punhos(ArmaAtaque):
    """Bare fists."""

    def gerar_forca_ataque(self) -> int:
        return int(self.min_forca + 0.6 * self.max_forca)

    def gerar_ruido_ataque(self) -> str:
        return "EEESSSSMMMAAAGGGAAA!!!"


class Rosa(ArmaAtaque):
    """A rose."""

    def gerar_forca_ataque(self) -> int:
        return self.max_forca

    def gerar_ruido_ataque(self) -> str:
        return "plin plin"


class SoroSuperSoldado(ArmaAtaque):
    """The super-soldier serum."""

    def gerar_forca_ataque(self) -> int:
        return self.max_forca - _div(self.min_forca, 2)

    def gerar_ruido_ataque(self) -> str:
        return "Anabolizantes "


class Laser(ArmaAtaque):
    """A laser beam."""

    def gerar_forca_ataque(self) -> int:
        return _div(self.min_forca * self.max_forca, 4)

    def gerar_ruido_ataque(self) -> str:
        return "tzzz"


@dataclass
class ArmaDefesa:
    """A piece of defensive gear with a fixed resistance."""

    descricao_arma: str
    resistencia: int

    def __post_init__(self) -> None:
        if type(self) is ArmaDefesa:
            raise TypeError("ArmaDefesa is abstract; use a concrete piece of gear")


class Botas(ArmaDefesa):
    """Boots."""


class Calca(ArmaDefesa):
    """Trousers."""


class Capacete(ArmaDefesa):
    """A helmet."""


class Colete(ArmaDefesa):
    """A vest."""


class Escudo(ArmaDefesa):
    """A shield."""


class Luvas(ArmaDefesa):
    """Gloves."""