# src/hieracfg/core/config/node.py
"""
Modelo de nós da árvore de configuração.

A árvore é armazenada com tipos nativos do Python (`dict`, `list` e
escalares). Este módulo fornece uma visão *tagged* fechada sobre esses
valores, permitindo que chamadores inspecionem o tipo de um nó sem
recorrer a `isinstance` espalhados pelo código.

Tipos de nó:
    - Scalar   → NULL, BOOL, INT, FLOAT, STRING
    - Sequence → SEQUENCE (lista ordenada de nós)
    - Mapping  → MAPPING (chaves `str` únicas, ordem de inserção preservada)

Decisões arquiteturais:
    - `bool` é classificado antes de `int` (bool é subclasse de int)
    - Valores fora do modelo são rejeitados explicitamente
    - Chaves de mapas (de documentos ou gravadas via `set`) são normalizadas para `str`

Invariantes:
    - `node_kind` é exaustivo para valores do modelo
    - Nenhuma função deste módulo muta o valor recebido, exceto quando
      documentado
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from .errors import DuplicateKeyError, UnsupportedValueTypeError


class NodeKind(str, Enum):
    NULL = "null"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    SEQUENCE = "sequence"
    MAPPING = "mapping"

    @property
    def is_scalar(self) -> bool:
        return self not in (NodeKind.SEQUENCE, NodeKind.MAPPING)


@dataclass(frozen=True)
class Node:
    """
    Visão imutável de um nó resolvido: tipo + valor.

    O `value` é uma referência para o objeto armazenado na árvore
    (nenhuma cópia é feita); mutar um `dict` ou `list` obtido aqui
    altera o Config de origem.
    """

    kind: NodeKind
    value: Any


def node_kind(value: Any) -> Optional[NodeKind]:
    """
    Classifica um valor nativo em um `NodeKind`.

    Returns:
        Optional[NodeKind]: O tipo do nó, ou None se o valor estiver
        fora do modelo (ex.: datetime, set, objetos arbitrários).
    """
    if value is None:
        return NodeKind.NULL
    if isinstance(value, bool):
        return NodeKind.BOOL
    if isinstance(value, int):
        return NodeKind.INT
    if isinstance(value, float):
        return NodeKind.FLOAT
    if isinstance(value, str):
        return NodeKind.STRING
    if isinstance(value, list):
        return NodeKind.SEQUENCE
    if isinstance(value, dict):
        return NodeKind.MAPPING
    return None


def validate_value(value: Any) -> None:
    """
    Garante que o valor (e seus filhos) pertence ao modelo de nós.

    Raises:
        UnsupportedValueTypeError: Se algum valor não puder ser representado.
    """
    kind = node_kind(value)
    if kind is None:
        raise UnsupportedValueTypeError(
            f"Tipo de valor não suportado na árvore de config: {type(value).__name__}"
        )
    if kind is NodeKind.SEQUENCE:
        for item in value:
            validate_value(item)
    elif kind is NodeKind.MAPPING:
        for item in value.values():
            validate_value(item)


def normalize_tree(value: Any) -> Any:
    """
    Retorna uma cópia do valor adequada ao modelo de nós.

    - Chaves de mapas são convertidas em `str`: YAML permite chaves não
      textuais (`1: x`, `true: y`) e caminhos pontuados só endereçam texto.
    - Escalares fora do modelo (ex.: datas de YAML) viram texto via `str`.

    Raises:
        DuplicateKeyError: Se duas chaves do mesmo mapa produzirem o mesmo texto.
    """
    if isinstance(value, dict):
        out: Dict[str, Any] = {}
        for key, item in value.items():
            text = _key_text(key)
            if text in out:
                raise DuplicateKeyError(f"Chave duplicada após normalização: {text!r}")
            out[text] = normalize_tree(item)
        return out
    if isinstance(value, (list, tuple)):
        return [normalize_tree(item) for item in value]
    if node_kind(value) is None:
        return str(value)
    return value


def _key_text(key: Any) -> str:
    # mesma grafia que YAML usa para bool e null
    if key is None:
        return "null"
    if isinstance(key, bool):
        return "true" if key else "false"
    return str(key)
