# arena-vingadores

Um pequeno simulador de combate entre duas equipes de heróis. Cada personagem
tem pontos de vida, uma arma de ataque e uma arma de defesa. A cada rodada uma
das duas equipes é sorteada para atacar; um personagem sorteado dessa equipe
golpeia um personagem sorteado da equipe adversária. O dano é a força do ataque
menos a resistência da defesa, nunca negativo, e a vida nunca cai abaixo de
zero. O combate termina quando a vida somada de uma das equipes chega a zero.

## Instalação

```
pip install .
```

## Uso pela linha de comando

```
arena-vingadores
```

Monta as duas equipes padrão (Capitão América, Hulk e Viúva Negra na equipe 2,
Homem de Ferro e Thor na equipe 1) e imprime uma linha por rodada até o fim do
combate.

Opções:

- `--semente N` — semente do gerador aleatório, para repetir o mesmo combate;
- `--rodadas N` — para depois de no máximo `N` rodadas.

## Uso como biblioteca

```python
import random

from arena_vingadores.armas import Colete, Escudo, Martelo, Rosa
from arena_vingadores.personagens import Chaves, Thor
from arena_vingadores.simulador import Simulador

thor = Thor(1, "Thor", 140, Martelo("Mjolnir", 1, 10), Colete("De Combate", 7))
chaves = Chaves(2, "Chaves", 80, Rosa("Vermelha", 1, 12), Escudo("De Madeira", 2))

simulador = Simulador(rng=random.Random(42))
simulador.adicionar_personagem(thor, 1)
simulador.adicionar_personagem(chaves, 2)

for rodada in simulador.rodadas():
    print(rodada)
```

### `arena_vingadores.simulador`

`Simulador(rng=None, limite_rodadas=None)` guarda as equipes 1 e 2. O `rng` é
um `random.Random` usado em todos os sorteios; `limite_rodadas`, se indicado,
encerra o combate depois desse número de rodadas.

- `adicionar_personagem(personagem, equipe)` põe o personagem na equipe 1 ou 2.
- `remover_personagem(personagem, equipe)` tira da equipe o membro com o mesmo
  `id` e devolve `True`, ou `False` se não houver nenhum.
- `calcular_vida_equipe(equipe)` devolve a vida somada da equipe.
- `rodadas()` executa o combate e produz um `Rodada` por golpe.
- `iniciar_simulacao(saida=None)` executa o combate inteiro, escreve uma linha
  por rodada em `saida` (por padrão a saída padrão) e devolve o número da
  equipe vencedora, ou `None` se o combate parou com as duas ainda vivas.

Um número de equipe diferente de 1 ou 2 levanta `ValueError`.

`Rodada` registra `equipe_atacante`, `atacante`, `defensor`, `dano` e
`vida_restante` do defensor; `str(rodada)` descreve o golpe em uma linha, com
a frase do atacante, a arma e o seu ruído.

### `arena_vingadores.principal`

`montar_simulador(rng=None)` devolve o simulador já montado com as equipes
padrão; `main(argv=None)` é o comando `arena-vingadores`.

### Armas (`arena_vingadores.armas`)

Ataque, derivadas de `ArmaAtaque(descricao_arma, min_forca, max_forca)`:
`Bastao`, `Colher`, `Martelo`, `Punhos`, `Rosa`, `SoroSuperSoldado`, `Laser`.
Cada uma calcula a força em `gerar_forca_ataque()` a partir de `min_forca` e
`max_forca` com uma fórmula própria e fixa, e tem o seu ruído em
`gerar_ruido_ataque()`. `descricao()` devolve o nome e a faixa de força.

Defesa, derivadas de `ArmaDefesa(descricao_arma, resistencia)`: `Botas`,
`Calca`, `Capacete`, `Colete`, `Escudo`, `Luvas`, cada uma com uma resistência
fixa. `ArmaDefesa` não pode ser instanciada diretamente.

### Personagens (`arena_vingadores.personagens`)

`CapitaoAmerica`, `Chaves`, `HomemFerro`, `Hulk`, `Thor` e `ViuvaNegra`,
derivados de `Personagem(id, nome, vida, arma_ataque, arma_defesa)`.
`gerar_ataque()` usa a força da arma de ataque, `criar_defesa()` a resistência
da arma de defesa, e `pegar_descricao()` devolve a frase de cada um.

## Testes

```
pip install .[test]
pytest
```