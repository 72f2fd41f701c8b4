# src/hieracfg/core/config/path.py
"""
Resolução de caminhos pontuados sobre a árvore de configuração.

Um caminho como `clothing.pants.size` é dividido em segmentos separados
por `.` (sem escape de pontos literais) e percorrido a partir do root,
chave a chave.

Política de resolução:
    - leitura → cada segmento exige um mapa contendo a chave; qualquer
      ausência ou nó intermediário não-mapa resulta em "não encontrado"
    - escrita → segmentos ausentes (ou intermediários não-mapa) são
      substituídos por mapas vazios; o último segmento é sobrescrito

Invariantes:
    - Leitura nunca copia: o valor retornado é uma referência da árvore
    - Leitura nunca muta a árvore
    - Escrita sempre tem sucesso sobre um root do tipo dict
"""

from typing import Any, Dict, List, Tuple


SEPARATOR = "."

_MISSING = object()


def split_path(path: str) -> List[str]:
    """
    Divide um caminho pontuado em segmentos.

    Não há escape: `a.b` é sempre dois segmentos. `""` produz `[""]`.
    """
    return path.split(SEPARATOR)


def join_path(prefix: str, key: str) -> str:
    """Anexa `key` ao prefixo; prefixo vazio retorna a própria chave."""
    if not prefix:
        return key
    return f"{prefix}{SEPARATOR}{key}"


def resolve(root: Dict[str, Any], path: str) -> Tuple[bool, Any]:
    """
    Resolve um caminho pontuado em modo leitura.

    Args:
        root (Dict[str, Any]): Mapa raiz da árvore.
        path (str): Caminho pontuado (ex.: "clothing.pants.size").

    Returns:
        Tuple[bool, Any]: (True, valor) quando o caminho existe;
        (False, None) caso contrário. Não há correspondência parcial.
    """
    current: Any = root
    for segment in split_path(path):
        if not isinstance(current, dict):
            return False, None
        current = current.get(segment, _MISSING)
        if current is _MISSING:
            return False, None
    return True, current


def assign(root: Dict[str, Any], path: str, value: Any) -> None:
    """
    Escreve `value` no caminho pontuado, criando mapas intermediários.

    Um intermediário existente que não seja mapa é substituído por um
    mapa novo: quem escreve por último define o formato da árvore.
    Views obtidas via `sub` que apontavam para o nó substituído deixam
    de enxergar a árvore de origem.
    """
    *parents, leaf = split_path(path)
    current = root
    for segment in parents:
        child = current.get(segment)
        if not isinstance(child, dict):
            child = {}
            current[segment] = child
        current = child
    current[leaf] = value
