# src/hieracfg/core/config/hashing.py
"""
Impressão digital (fingerprint) da árvore de configuração.

O fingerprint identifica o *conteúdo* de uma árvore: duas árvores com as
mesmas folhas nos mesmos caminhos produzem o mesmo valor, seja qual for
a ordem de inserção das chaves. O Config o usa para informar, nos eventos
de merge e de `bind_envs`, se a operação alterou a árvore.

Política (v1):
    - JSON canônico (chaves ordenadas, separadores compactos, UTF-8)
    - SHA-256 em hexadecimal
    - Pode ser calculado sobre qualquer nó (mapa, lista ou escalar),
      o que permite comparar sub-árvores obtidas via `sub`

Invariantes:
    - O valor gerado é sempre uma string hexadecimal de 64 caracteres
    - O cálculo não muta a árvore
"""

import hashlib
import json
from typing import Any, Dict


def canonical_bytes(node: Any) -> bytes:
    """Serializa um nó em JSON canônico; escalares fora do JSON viram texto."""
    text = json.dumps(node, sort_keys=True, separators=(",", ":"), ensure_ascii=False, default=str)
    return text.encode("utf-8")


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    Gera o fingerprint SHA-256 de uma árvore com raiz `dict`.

    Raises:
        TypeError: Se a raiz não for um dicionário.
    """
    if not isinstance(config, dict):
        raise TypeError(
            f"Config para hashing deve ser dict, recebido: {type(config).__name__}"
        )
    return node_hash(config)


def node_hash(node: Any) -> str:
    return hashlib.sha256(canonical_bytes(node)).hexdigest()
