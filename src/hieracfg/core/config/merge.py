# src/hieracfg/core/config/merge.py
"""
Deep-merge de árvores de configuração.

Este módulo implementa a política de merge usada para combinar um
documento secundário (`src`) em um documento primário (`dst`).

Política de merge (v1):
    - dict + dict           → merge recursivo por chave
    - chave presente em ambos (qualquer outro caso) → o valor de `dst` prevalece
    - chave presente apenas em `src` → copiada (deepcopy) para `dst`
    - chave presente apenas em `dst` → preservada

Ou seja: o destino vence em conflito, e a união vale na ausência.
Um merge "last-write-wins" inverteria essa precedência.

Invariantes:
    - O merge é idempotente para um `src` fixo
    - `src` nunca é mutado e não compartilha nós com `dst` após o merge
    - Nenhuma folha existente em `dst` é sobrescrita

Limites explícitos:
    - Não carrega documentos
    - Não realiza coerção de tipos
"""

from copy import deepcopy
from typing import Any, Dict

from .errors import ConfigTypeConflictError


def merge(dst: Dict[str, Any], src: Dict[str, Any]) -> Dict[str, Any]:
    """
    Aplica o merge de `src` sobre `dst`, in place.

    Args:
        dst (Dict[str, Any]): Árvore de destino (mutada).
        src (Dict[str, Any]): Árvore de origem (somente leitura).

    Returns:
        Dict[str, Any]: O próprio `dst`, para encadeamento.

    Raises:
        ConfigTypeConflictError: Se `dst` ou `src` não forem dicts no nível raiz.
    """
    if not isinstance(dst, dict) or not isinstance(src, dict):
        raise ConfigTypeConflictError(
            f"Merge requer dicts no nível raiz, recebido: "
            f"{type(dst).__name__} vs {type(src).__name__}"
        )

    for key, src_value in src.items():
        if key not in dst:
            dst[key] = deepcopy(src_value)
            continue

        dst_value = dst[key]

        # dict -> merge recursivo
        if isinstance(dst_value, dict) and isinstance(src_value, dict):
            merge(dst_value, src_value)

        # demais casos: dst prevalece

    return dst
