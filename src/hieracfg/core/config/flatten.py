# src/hieracfg/core/config/flatten.py
"""
Achatamento da árvore em pares caminho pontuado → valor de folha.

Política (v1):
    - Mapping  → recursão em cada chave, acumulando `prefixo.chave`
    - Sequence → folha (a lista inteira é um único valor)
    - Scalar   → folha
    - Mapping vazio → não produz entradas

A ordem de saída segue a ordem de inserção dos dicts, mas consumidores
não devem depender dela.
"""

from typing import Any, Dict

from .path import assign, join_path


def all_settings(root: Dict[str, Any]) -> Dict[str, Any]:
    """
    Retorna todas as folhas da árvore indexadas por caminho completo.

    Listas são retornadas como cópia rasa, de modo que alterar o
    resultado não altera a árvore.
    """
    out: Dict[str, Any] = {}
    _walk(root, "", out)
    return out


def _walk(node: Dict[str, Any], prefix: str, out: Dict[str, Any]) -> None:
    for key, value in node.items():
        path = join_path(prefix, key)
        if isinstance(value, dict):
            _walk(value, path, out)
        elif isinstance(value, list):
            out[path] = list(value)
        else:
            out[path] = value


def unflatten(settings: Dict[str, Any]) -> Dict[str, Any]:
    """
    Reconstrói uma árvore a partir de pares caminho → valor.

    Inverso de `all_settings` (a menos de mapas vazios, que não
    sobrevivem ao achatamento).
    """
    root: Dict[str, Any] = {}
    for path, value in settings.items():
        assign(root, path, value)
    return root
