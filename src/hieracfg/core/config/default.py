# src/hieracfg/core/config/default.py
"""
Instância padrão de Config, compartilhada pelo processo.

Ciclo de vida:
    - criada na primeira chamada a `default_config()`
    - descartada por `reset_default()` (uso principal: isolamento de testes)

As funções deste módulo delegam para a instância padrão e espelham a
superfície pública de `Config`; a semântica de cada uma é a do método
homônimo (leituras nunca levantam exceção, `sub` retorna uma view).

Concorrência:
    - Mutações concorrentes sobre a instância compartilhada devem ser
      serializadas pelo chamador
"""

from typing import Any, Dict, List, Optional

from .env import EnvLookup
from .loader import Buffer
from .node import Node
from .store import Config


_default: Optional[Config] = None


def default_config() -> Config:
    """Retorna a instância padrão, criando-a vazia na primeira chamada."""
    global _default
    if _default is None:
        _default = Config()
    return _default


def reset_default() -> None:
    """Descarta a instância padrão; a próxima chamada cria uma nova."""
    global _default
    _default = None


def read_buffer(data: Buffer, fmt: str = "yaml") -> None:
    """Substitui a árvore da instância padrão pelo documento (ver `Config.read_buffer`)."""
    default_config().read_buffer(data, fmt)


def merge_buffer(data: Buffer, fmt: str = "yaml") -> None:
    """Mescla o documento na instância padrão; valores atuais prevalecem."""
    default_config().merge_buffer(data, fmt)


def get(path: str) -> Any:
    """Valor bruto no caminho, ou None."""
    return default_config().get(path)


def get_node(path: str) -> Optional[Node]:
    """Nó tipado no caminho, ou None se ausente."""
    return default_config().get_node(path)


def is_set(path: str) -> bool:
    """Indica se o caminho existe na instância padrão."""
    return default_config().is_set(path)


def get_bool(path: str) -> bool:
    """Booleano no caminho; False na ausência ou em outro tipo."""
    return default_config().get_bool(path)


def get_int(path: str) -> int:
    """Inteiro no caminho; 0 na ausência ou em outro tipo."""
    return default_config().get_int(path)


def get_float(path: str) -> float:
    """Float no caminho; 0.0 na ausência ou em outro tipo."""
    return default_config().get_float(path)


def get_string(path: str) -> str:
    """Texto no caminho; "" na ausência ou em outro tipo."""
    return default_config().get_string(path)


def get_list(path: str) -> List[Any]:
    """Lista no caminho; [] na ausência ou em outro tipo."""
    return default_config().get_list(path)


def set_value(path: str, value: Any) -> None:
    """
    Escreve um valor no caminho da instância padrão (ver `Config.set`).

    Nomeada `set_value` porque `set` sombrearia o builtin no namespace
    do pacote.
    """
    default_config().set(path, value)


def sub(path: str) -> Optional[Config]:
    """View do mapa no caminho, ou None se ausente ou não-mapa."""
    return default_config().sub(path)


def all_settings() -> Dict[str, Any]:
    """Folhas da instância padrão indexadas por caminho pontuado."""
    return default_config().all_settings()


def bind_envs(prefix: str, lookup: Optional[EnvLookup] = None) -> Dict[str, Any]:
    """Sobrescreve folhas existentes a partir do ambiente (ver `Config.bind_envs`)."""
    return default_config().bind_envs(prefix, lookup)
