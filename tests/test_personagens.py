import pytest

from arena_vingadores.armas import Botas, Colete, Martelo, Rosa
from arena_vingadores.personagens import (
    CapitaoAmerica,
    Chaves,
    HomemFerro,
    Hulk,
    Personagem,
    Thor,
    ViuvaNegra,
)


def _thor():
    return Thor(3, "Eq1", 140, Martelo("Dothor", 1, 10), Colete("De Combate", 7))


def test_personagem_is_abstract():
    with pytest.raises(TypeError):
        Personagem(0, "x", 10, Rosa("r", 1, 2), Botas("b", 1))


def test_fields_kept():
    thor = _thor()
    assert (thor.id, thor.nome, thor.vida) == (3, "Eq1", 140)


def test_gerar_ataque_uses_weapon():
    thor = _thor()
    assert thor.gerar_ataque() == thor.arma_ataque.gerar_forca_ataque()


def test_gerar_ataque_rosa_is_max():
    chaves = Chaves(9, "Eq1", 50, Rosa("Vermelha", 2, 12), Botas("De Combate", 4))
    assert chaves.gerar_ataque() == 12


def test_criar_defesa_is_resistance():
    assert _thor().criar_defesa() == 7


def test_vida_can_change():
    thor = _thor()
    thor.vida = 0
    assert thor.vida == 0


def test_identity_equality():
    assert _thor() != _thor() and len({_thor(), _thor()}) == 2


@pytest.mark.parametrize(
    "classe, frase",
    [
        (CapitaoAmerica, "Vingadores, unidos!"),
        (Chaves, "Eii, não contava com a minha astucia?"),
        (HomemFerro, "Se não pudermos proteger a Terra, pode ter certeza que iremos vingá-la."),
        (Hulk, "Hulk esmagaaaa!!!!"),
        (Thor, "Traga-me o Thanos!"),
        (
            ViuvaNegra,
            "Não disse que deveríamos ir embora. Há formas piores de morrer. "
            "Onde mais conseguiria uma vista assim?”",
        ),
    ],
)
def test_pegar_descricao(classe, frase):
    personagem = classe(1, "Eq", 100, Rosa("r", 1, 2), Botas("b", 1))
    assert personagem.pegar_descricao() == frase