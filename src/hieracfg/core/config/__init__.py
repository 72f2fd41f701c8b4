# src/hieracfg/core/config/__init__.py

"""
Camada de configuração do hieracfg.

Este pacote contém o modelo de árvore, a resolução de caminhos
pontuados, o merge, o achatamento e a sobrescrita via ambiente.

A configuração no hieracfg é:
    - hierárquica (mapas aninhados, listas e escalares)
    - endereçada por caminhos pontuados (`a.b.c`)
    - tolerante em leitura (ausência nunca é erro)

Responsabilidades do pacote:
    - Leitura de documentos YAML/JSON em memória
    - Leitura e escrita tipadas por caminho
    - Merge com precedência do destino
    - Extração de sub-árvores como views
    - Achatamento em pares caminho → valor
    - Sobrescrita de folhas existentes a partir do ambiente

Limites explícitos:
    - Não lê arquivos
    - Não interpreta argumentos de linha de comando
"""

from .errors import (
    ConfigError,
    ConfigParseError,
    ConfigTypeConflictError,
    DuplicateKeyError,
    EnvCoercionError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
    UnsupportedValueTypeError,
)
from .node import Node, NodeKind, node_kind
from .store import Config

__all__ = [
    "Config",
    "ConfigError",
    "ConfigParseError",
    "ConfigTypeConflictError",
    "DuplicateKeyError",
    "EnvCoercionError",
    "InvalidConfigRootTypeError",
    "Node",
    "NodeKind",
    "UnsupportedConfigFormatError",
    "UnsupportedValueTypeError",
    "node_kind",
]
