# src/hieracfg/core/config/loader.py
"""
Leitura de documentos de configuração em memória.

Este módulo converte um buffer (bytes ou texto) em uma árvore genérica
com raiz do tipo `dict`. A gramática dos formatos pertence aos parsers
externos (PyYAML e json); aqui só são validados os requisitos
estruturais mínimos.

Formatos suportados (v1):
    - YAML ("yaml", "yml")
    - JSON ("json")

Decisões arquiteturais:
    - Documentos vazios são interpretados como mapas vazios
    - A raiz deve ser um dicionário
    - Chaves de mapas são normalizadas para `str`

Limites explícitos:
    - Não lê arquivos nem acessa filesystem
    - Não aplica merge
"""

import json
from typing import Any, Dict, Union

import yaml  # PyYAML

from .errors import (
    ConfigParseError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from .node import normalize_tree


YAML_FORMATS = {"yaml", "yml"}
JSON_FORMATS = {"json"}

Buffer = Union[bytes, str]


def parse_buffer(data: Buffer, fmt: str = "yaml") -> Dict[str, Any]:
    """
    Interpreta um buffer e retorna a árvore correspondente.

    Args:
        data (Union[bytes, str]): Conteúdo do documento. Bytes são
            decodificados como UTF-8.
        fmt (str): Nome do formato ("yaml", "yml" ou "json").

    Returns:
        Dict[str, Any]: Árvore com raiz dict e chaves textuais.

    Raises:
        UnsupportedConfigFormatError: Se o formato não for suportado.
        ConfigParseError: Se o documento estiver malformado.
        InvalidConfigRootTypeError: Se a raiz não for um dicionário.
    """
    fmt_key = fmt.lower().lstrip(".")

    if isinstance(data, bytes):
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as err:
            raise ConfigParseError(f"Documento não é UTF-8 válido: {err}") from err
    else:
        text = data

    if fmt_key in YAML_FORMATS:
        try:
            parsed = yaml.safe_load(text)
        except yaml.YAMLError as err:
            raise ConfigParseError(f"YAML inválido: {err}") from err

    elif fmt_key in JSON_FORMATS:
        if not text.strip():
            parsed = None
        else:
            try:
                parsed = json.loads(text)
            except json.JSONDecodeError as err:
                raise ConfigParseError(f"JSON inválido: {err}") from err

    else:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {fmt}")

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(parsed).__name__}"
        )

    return normalize_tree(parsed)
