# src/hieracfg/__init__.py
"""
hieracfg — armazenamento hierárquico de configuração com caminhos pontuados.

Um documento estruturado (YAML ou JSON) é interpretado em uma árvore em
memória, acessada por caminhos como `clothing.pants.size`.

Uso básico:

    cfg = Config()
    cfg.read_buffer(b"age: 35")
    cfg.get_int("age")           # 35
    cfg.get_string("missing")    # ""

Este módulo também expõe funções de conveniência que operam sobre uma
instância padrão compartilhada pelo processo (`default_config()`).

Arquitetura em alto nível:
    - core.config → modelo de nós, resolução de caminhos, merge,
                    achatamento, ambiente e instância padrão
"""
# src/hieracfg/__init__.py
from .core.config import (
    Config,
    ConfigError,
    ConfigParseError,
    ConfigTypeConflictError,
    DuplicateKeyError,
    InvalidConfigRootTypeError,
    Node,
    NodeKind,
    UnsupportedConfigFormatError,
    UnsupportedValueTypeError,
)
from .core.config.default import (
    all_settings,
    bind_envs,
    default_config,
    get,
    get_bool,
    get_float,
    get_int,
    get_list,
    get_node,
    get_string,
    is_set,
    merge_buffer,
    read_buffer,
    reset_default,
    set_value,
    sub,
)

__all__ = [
    "Config",
    "ConfigError",
    "ConfigParseError",
    "ConfigTypeConflictError",
    "DuplicateKeyError",
    "InvalidConfigRootTypeError",
    "Node",
    "NodeKind",
    "UnsupportedConfigFormatError",
    "UnsupportedValueTypeError",
    "all_settings",
    "bind_envs",
    "default_config",
    "get",
    "get_bool",
    "get_float",
    "get_int",
    "get_list",
    "get_node",
    "get_string",
    "is_set",
    "merge_buffer",
    "read_buffer",
    "reset_default",
    "set_value",
    "sub",
]
