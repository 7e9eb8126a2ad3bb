"""Team-against-team combat simulation."""

from __future__ import annotations

import random
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TextIO

from arena_vingadores.personagens import Personagem

__all__ = ["Rodada", "Simulador"]

_EQUIPES = (1, 2)


@dataclass(frozen=True)
class Rodada:
    """One exchange: an attacker strikes a defender for some damage."""

    equipe_atacante: int
    atacante: Personagem
    defensor: Personagem
    dano: int
    vida_restante: int

    def __str__(self) -> str:
        arma = self.atacante.arma_ataque
        return (
            f"{self.atacante.nome} [{self.atacante.pegar_descricao()}] "
            f"ataca {self.defensor.nome} com {arma.descricao()}: "
            f"{arma.gerar_ruido_ataque()} -> dano {self.dano}, "
            f"vida de {self.defensor.nome}: {self.vida_restante}"
        )


class Simulador:
    """Holds two teams and makes them fight until one has no life left."""

    def __init__(
        self,
        rng: random.Random | None = None,
        limite_rodadas: int | None = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.limite_rodadas = limite_rodadas
        self.equipes: dict[int, list[Personagem]] = {n: [] for n in _EQUIPES}

    def _equipe(self, equipe: int) -> list[Personagem]:
        try:
            return self.equipes[equipe]
        except KeyError:
            raise ValueError(f"equipe must be 1 or 2, not {equipe!r}") from None

    def adicionar_personagem(self, personagem: Personagem, equipe: int) -> None:
        """Add a character to team 1 or 2."""
        self._equipe(equipe).append(personagem)

    def remover_personagem(self, personagem: Personagem, equipe: int) -> bool:
        """Remove the member with the same id; return whether one was found."""
        membros = self._equipe(equipe)
        for posicao, membro in enumerate(membros):
            if membro.id == personagem.id:
                del membros[posicao]
                return True
        return False

    def calcular_vida_equipe(self, equipe: int) -> int:
        """Return the total life of a team."""
        return sum(p.vida for p in self._equipe(equipe))

    def _proximo_personagem(self, equipe: int) -> Personagem | None:
        membros = self._equipe(equipe)
        return self.rng.choice(membros) if membros else None

    @staticmethod
    def _criar_combate(atacante: Personagem, defensor: Personagem) -> int:
        dano = max(0, atacante.gerar_ataque() - defensor.criar_defesa())
        defensor.vida = max(0, defensor.vida - dano)
        return dano

    def _ambas_vivas(self) -> bool:
        return all(self.calcular_vida_equipe(n) > 0 for n in _EQUIPES)

    def rodadas(self) -> Iterator[Rodada]:
        """Fight round by round, yielding each round until a team is down."""
        feitas = 0
        while self._ambas_vivas():
            if self.limite_rodadas is not None and feitas >= self.limite_rodadas:
                return
            equipe_atacante = self.rng.randrange(2) + 1
            equipe_defensora = 3 - equipe_atacante
            atacante = self._proximo_personagem(equipe_atacante)
            defensor = self._proximo_personagem(equipe_defensora)
            dano = self._criar_combate(atacante, defensor)
            feitas += 1
            yield Rodada(equipe_atacante, atacante, defensor, dano, defensor.vida)

    def iniciar_simulacao(self, saida: TextIO | None = None) -> int | None:
        """Run the fight, writing one line per round; return the winning team."""
        destino = saida if saida is not None else sys.stdout
        for rodada in self.rodadas():
            print(rodada, file=destino)
        vivas = [n for n in _EQUIPES if self.calcular_vida_equipe(n) > 0]
        return vivas[0] if len(vivas) == 1 else None