"""Command that sets up the default teams and runs the fight."""

from __future__ import annotations

import argparse
import random
import sys

from arena_vingadores.armas import (
    Bastao,
    Botas,
    Calca,
    Capacete,
    Colete,
    Laser,
    Luvas,
    Martelo,
    Punhos,
    SoroSuperSoldado,
)
from arena_vingadores.personagens import CapitaoAmerica, HomemFerro, Hulk, Thor, ViuvaNegra
from arena_vingadores.simulador import Simulador

__all__ = ["montar_simulador", "main"]


def montar_simulador(rng: random.Random | None = None) -> Simulador:
    """Build the simulator with the default line-up of both teams."""
    bastao = Bastao("Nija", 1, 4)
    laser = Laser("Dos punhos", 1, 9)
    martelo = Martelo("Dothor", 1, 10)
    punhos = Punhos("Do Hulk", 1, 8)
    soro = SoroSuperSoldado("Anabolizante", 1, 6)

    botas = Botas("De Combate", 4)
    calca = Calca("De Combate", 6)
    capacete = Capacete("De Combate", 5)
    colete = Colete("De Combate", 7)
    luvas = Luvas("De Combate", 3)

    simulador = Simulador(rng=rng)
    simulador.adicionar_personagem(CapitaoAmerica(0, "Eq2", 110, soro, botas), 2)
    simulador.adicionar_personagem(HomemFerro(1, "Eq1", 100, laser, calca), 1)
    simulador.adicionar_personagem(Hulk(2, "Eq2", 120, punhos, capacete), 2)
    simulador.adicionar_personagem(Thor(3, "Eq1", 140, martelo, colete), 1)
    simulador.adicionar_personagem(ViuvaNegra(4, "Eq2 ", 100, bastao, luvas), 2)
    return simulador


def main(argv: list[str] | None = None) -> int:
    """Run the default fight, printing every round."""
    parser = argparse.ArgumentParser(description="Run the arena fight simulation.")
    parser.add_argument("--rodadas", type=int, default=None, help="stop after this many rounds")
    parser.add_argument("--semente", type=int, default=None, help="seed for the random choices")
    args = parser.parse_args(argv)

    simulador = montar_simulador(random.Random(args.semente))
    simulador.limite_rodadas = args.rodadas
    simulador.iniciar_simulacao(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())