import random

from arena_vingadores.personagens import CapitaoAmerica, HomemFerro, Hulk, Thor, ViuvaNegra
from arena_vingadores.principal import main, montar_simulador


def test_default_teams_composition():
    sim = montar_simulador(random.Random(1))
    assert [type(p) for p in sim.equipes[1]] == [HomemFerro, Thor]
    assert [type(p) for p in sim.equipes[2]] == [CapitaoAmerica, Hulk, ViuvaNegra]
    assert [p.id for p in sim.equipes[1]] == [1, 3]
    assert [p.id for p in sim.equipes[2]] == [0, 2, 4]


def test_default_team_lives():
    sim = montar_simulador(random.Random(1))
    assert sim.calcular_vida_equipe(1) == 100 + 140
    assert sim.calcular_vida_equipe(2) == 110 + 120 + 100


def test_default_weapons():
    sim = montar_simulador(random.Random(1))
    thor = sim.equipes[1][1]
    assert thor.arma_ataque.descricao() == "Dothor\t[1,10]"
    assert thor.arma_defesa.resistencia == 7


def test_rounds_respect_limit_and_lives_never_negative():
    sim = montar_simulador(random.Random(5))
    sim.limite_rodadas = 30
    rodadas = list(sim.rodadas())
    assert len(rodadas) == 30
    for r in rodadas:
        assert r.vida_restante >= 0
        assert r.dano >= 0


def test_main_prints_one_line_per_round(capsys):
    assert main(["--rodadas", "3", "--semente", "9"]) == 0
    linhas = capsys.readouterr().out.splitlines()
    assert len(linhas) == 3
    assert all("ataca" in linha for linha in linhas)


def test_main_is_reproducible_with_seed(capsys):
    main(["--rodadas", "5", "--semente", "21"])
    primeira = capsys.readouterr().out
    main(["--rodadas", "5", "--semente", "21"])
    segunda = capsys.readouterr().out
    assert primeira == segunda
    assert len(primeira.splitlines()) == 5