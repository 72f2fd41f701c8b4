# src/hieracfg/core/config/store.py
"""
Objeto Config: dono da árvore e superfície pública de acesso.

O Config possui exatamente um mapa raiz e expõe:
    - leitura/substituição da árvore a partir de um documento
    - leitura tipada por caminho pontuado (`get_bool`, `get_int`, ...)
    - escrita por caminho pontuado (`set`)
    - merge de um documento secundário (destino prevalece)
    - extração de sub-árvore como view (`sub`)
    - achatamento (`all_settings`)
    - sobrescrita via ambiente (`bind_envs`)

Política de falhas:
    - Leituras NUNCA levantam exceção: ausência ou tipo incompatível
      degradam para o zero-value documentado (False / 0 / 0.0 / "" / [])
    - Quem precisa distinguir "ausente" de "zero-value presente" usa
      `get_node` ou `is_set`
    - Falhas de leitura de documento são explícitas (`ConfigParseError`)
      e deixam o root inalterado

Concorrência:
    - Nenhum lock interno; mutações de uma instância compartilhada
      devem ser serializadas pelo chamador

Logging:
    - Eventos estruturados são acumulados em `events` (dicts com
      level, message, timestamp e campos extras)
"""

from __future__ import annotations

import os
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from .env import EnvLookup, bind_envs as _bind_envs
from .errors import InvalidConfigRootTypeError
from .flatten import all_settings as _all_settings
from .hashing import compute_config_hash
from .loader import Buffer, parse_buffer
from .merge import merge
from .node import Node, node_kind, normalize_tree, validate_value
from .path import assign, resolve


class Config:
    """
    Árvore de configuração hierárquica acessada por caminhos pontuados.

    Uma instância criada por `sub` compartilha nós com o Config de origem:
    escritas feitas na view aparecem no pai, e vice-versa. `sub` retorna
    uma view, não uma cópia.
    """

    def __init__(self, root: Optional[Dict[str, Any]] = None) -> None:
        self._root: Dict[str, Any] = root if root is not None else {}
        self.events: List[Dict[str, Any]] = []

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> "Config":
        """Cria um Config a partir de uma árvore já interpretada (copiada)."""
        if not isinstance(data, dict):
            raise InvalidConfigRootTypeError(
                f"Config root deve ser dict, recebido: {type(data).__name__}"
            )
        validate_value(data)
        return cls(normalize_tree(data))

    @property
    def root(self) -> Dict[str, Any]:
        return self._root

    def __repr__(self) -> str:
        return f"Config({self._root!r})"

    # -----------------------------
    # Load
    # -----------------------------
    def read_buffer(self, data: Buffer, fmt: str = "yaml") -> None:
        """
        Substitui a árvore inteira pelo conteúdo do documento.

        O documento é interpretado por completo antes da troca; em caso
        de erro o root anterior é preservado.

        Raises:
            ConfigParseError: Documento malformado.
            UnsupportedConfigFormatError: Formato desconhecido.
            InvalidConfigRootTypeError: Raiz do documento não é um mapa.
        """
        tree = parse_buffer(data, fmt)
        self._root = tree
        self.log(level="INFO", message="config loaded", format=fmt, keys=len(tree))

    def merge_buffer(self, data: Buffer, fmt: str = "yaml") -> None:
        """Interpreta um documento e o mescla na árvore (valores atuais prevalecem)."""
        self._merge_tree(parse_buffer(data, fmt), source="buffer")

    def merge_config(self, other: "Config") -> None:
        self._merge_tree(other.root, source="config")

    def _merge_tree(self, src: Dict[str, Any], *, source: str) -> None:
        before_count = len(_all_settings(self._root))
        before_hash = self.fingerprint()
        merge(self._root, src)
        self.log(
            level="INFO",
            message="config merged",
            source=source,
            added_settings=len(_all_settings(self._root)) - before_count,
            changed=self.fingerprint() != before_hash,
        )

    # -----------------------------
    # Typed accessors
    # -----------------------------
    def get(self, path: str) -> Any:
        """
        Retorna o valor bruto no caminho (referência, sem cópia), ou None.

        None também é retornado para um null explícito; use `get_node`
        ou `is_set` para distinguir os dois casos.
        """
        _, value = resolve(self._root, path)
        return value

    def get_node(self, path: str) -> Optional[Node]:
        """Retorna o nó tipado no caminho, ou None se o caminho não existir."""
        found, value = resolve(self._root, path)
        if not found:
            return None
        kind = node_kind(value)
        if kind is None:
            return None
        return Node(kind=kind, value=value)

    def is_set(self, path: str) -> bool:
        """Indica se o caminho existe, mesmo que o valor seja null."""
        found, _ = resolve(self._root, path)
        return found

    def get_bool(self, path: str) -> bool:
        """Retorna o booleano no caminho; False na ausência ou em outro tipo."""
        value = self.get(path)
        return value if isinstance(value, bool) else False

    def get_int(self, path: str) -> int:
        """Retorna o inteiro no caminho; 0 na ausência ou em outro tipo (bool incluso)."""
        value = self.get(path)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        return 0

    def get_float(self, path: str) -> float:
        """Retorna o float no caminho; 0.0 na ausência ou em outro tipo (int incluso)."""
        value = self.get(path)
        return value if isinstance(value, float) else 0.0

    def get_string(self, path: str) -> str:
        """Retorna o texto no caminho; "" na ausência ou em outro tipo."""
        value = self.get(path)
        return value if isinstance(value, str) else ""

    def get_list(self, path: str) -> List[Any]:
        """Retorna a lista no caminho (referência); [] na ausência ou em outro tipo."""
        value = self.get(path)
        return value if isinstance(value, list) else []

    # -----------------------------
    # Mutation
    # -----------------------------
    def set(self, path: str, value: Any) -> None:
        """
        Escreve um valor no caminho, criando mapas intermediários.

        O valor é gravado já normalizado (cópia com chaves `str`), de modo
        que `set` seguido de leitura pelo caminho sempre encontra o valor.

        Raises:
            UnsupportedValueTypeError: Valor fora do modelo de nós.
            DuplicateKeyError: Chaves de um mapa colidem após a normalização.
        """
        validate_value(value)
        assign(self._root, path, normalize_tree(value))

    # -----------------------------
    # Views & export
    # -----------------------------
    def sub(self, path: str) -> Optional["Config"]:
        """
        Retorna uma view do mapa no caminho, ou None se ausente ou não-mapa.

        A view compartilha nós com este Config (sem cópia).
        """
        found, value = resolve(self._root, path)
        if not found or not isinstance(value, dict):
            return None
        return Config(value)

    def all_settings(self) -> Dict[str, Any]:
        """Retorna todas as folhas indexadas por caminho pontuado completo."""
        return _all_settings(self._root)

    def fingerprint(self) -> str:
        """SHA-256 do JSON canônico da árvore; árvores de mesmo conteúdo têm o mesmo valor."""
        return compute_config_hash(self._root)

    # -----------------------------
    # Environment
    # -----------------------------
    def bind_envs(self, prefix: str, lookup: Optional[EnvLookup] = None) -> Dict[str, Any]:
        """
        Sobrescreve folhas existentes com variáveis `<PREFIX>_<CAMINHO>`.

        Args:
            prefix (str): Prefixo dos nomes de variáveis.
            lookup (Optional[EnvLookup]): Consulta nome → valor. Por padrão,
                `os.environ.get`.

        Returns:
            Dict[str, Any]: Caminhos sobrescritos → valores aplicados.
        """
        if lookup is None:
            lookup = os.environ.get

        def _on_warning(path: str, env_name: str, reason: str) -> None:
            self.log(
                level="WARNING",
                message="env override warning",
                path=path,
                env=env_name,
                reason=reason,
            )

        before_hash = self.fingerprint()
        applied = _bind_envs(self._root, prefix, lookup, on_warning=_on_warning)
        for path in applied:
            self.log(level="INFO", message="env override applied", path=path, prefix=prefix)
        self.log(
            level="INFO",
            message="env overrides bound",
            prefix=prefix,
            applied=len(applied),
            changed=self.fingerprint() != before_hash,
        )
        return applied

    # -----------------------------
    # Logging
    # -----------------------------
    def log(self, *, level: str, message: str, **extra: Any) -> None:
        event = {
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)
