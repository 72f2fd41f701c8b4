# src/hieracfg/core/config/env.py
"""
Sobrescrita de valores da árvore a partir de variáveis de ambiente.

Convenção de nomes:
    caminho `clothing.jacket` com prefixo `APP` → `APP_CLOTHING_JACKET`

O binder percorre apenas as chaves JÁ existentes na árvore (via
`all_settings`): o mapeamento nome → caminho é ambíguo, então nenhuma
chave nova é criada a partir do ambiente.

Coerção (v1), pelo tipo da folha existente:
    - bool   → 1/0, true/false, yes/no, on/off (sem distinção de caixa)
    - int    → int(texto)
    - float  → float(texto)
    - list   → sequência YAML em fluxo (`[a, b]`) ou texto separado por
               vírgulas; no segundo caso cada item segue o tipo dos itens
               da lista existente, quando homogêneos
    - demais → texto como está

Invariantes:
    - Folhas cujo caminho pontuado não resolve de volta para elas (chaves
      contendo `.` literal) nunca são sobrescritas: gravar nesse caminho
      criaria uma sub-árvore nova

Limites explícitos:
    - Não acessa `os.environ` diretamente: a consulta é injetada
      (`EnvLookup`), o que permite testes sem estado de processo
"""

from typing import Any, Callable, Dict, List, Optional

import yaml

from .errors import ConfigError, EnvCoercionError
from .flatten import all_settings
from .node import NodeKind, node_kind, normalize_tree
from .path import SEPARATOR, assign, resolve


EnvLookup = Callable[[str], Optional[str]]
EnvWarning = Callable[[str, str, str], None]

_TRUE_WORDS = {"1", "true", "yes", "on", "y", "t"}
_FALSE_WORDS = {"0", "false", "no", "off", "n", "f"}


def env_var_name(prefix: str, path: str) -> str:
    """
    Deriva o nome da variável de ambiente de um caminho pontuado.

    Um prefixo vazio produz o nome sem `_` inicial.
    """
    name = path.replace(SEPARATOR, "_").upper()
    if not prefix:
        return name
    return f"{prefix.upper()}_{name}"


def coerce_env_value(raw: str, current: Any) -> Any:
    """
    Converte o texto de uma variável para o tipo da folha existente.

    Raises:
        EnvCoercionError: Se o texto não for compatível com o tipo atual.
    """
    kind = node_kind(current)

    if kind is NodeKind.BOOL:
        word = raw.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
        raise EnvCoercionError(f"Valor booleano inválido: {raw!r}")

    if kind is NodeKind.INT:
        try:
            return int(raw.strip())
        except ValueError as err:
            raise EnvCoercionError(f"Valor inteiro inválido: {raw!r}") from err

    if kind is NodeKind.FLOAT:
        try:
            return float(raw.strip())
        except ValueError as err:
            raise EnvCoercionError(f"Valor float inválido: {raw!r}") from err

    if kind is NodeKind.SEQUENCE:
        return _coerce_sequence(raw, current)

    return raw


def _coerce_sequence(raw: str, current: List[Any]) -> List[Any]:
    text = raw.strip()
    if text.startswith("["):
        try:
            parsed = yaml.safe_load(text)
        except yaml.YAMLError as err:
            raise EnvCoercionError(f"Sequência inválida: {raw!r}") from err
        if isinstance(parsed, list):
            try:
                return normalize_tree(parsed)
            except ConfigError as err:
                raise EnvCoercionError(f"Sequência inválida: {raw!r}") from err
    if not text:
        return []

    items = [item.strip() for item in text.split(",")]
    sample = _item_sample(current)
    if sample is None:
        return items
    return [coerce_env_value(item, sample) for item in items]


def _item_sample(current: List[Any]) -> Any:
    # primeiro item, quando todos os itens escalares têm o mesmo tipo
    kinds = {node_kind(item) for item in current}
    if len(kinds) != 1:
        return None
    kind = kinds.pop()
    if kind in (NodeKind.BOOL, NodeKind.INT, NodeKind.FLOAT):
        return current[0]
    return None


def bind_envs(
    root: Dict[str, Any],
    prefix: str,
    lookup: EnvLookup,
    on_warning: Optional[EnvWarning] = None,
) -> Dict[str, Any]:
    """
    Aplica as variáveis de ambiente definidas sobre as folhas existentes.

    Situações reportadas via `on_warning(path, env_name, motivo)`:
        - coerção falhou → o texto bruto é gravado (quem escreve por
          último define o formato)
        - o caminho da folha não resolve de volta para ela → a variável
          é ignorada

    Args:
        root (Dict[str, Any]): Árvore a ser sobrescrita (mutada).
        prefix (str): Prefixo dos nomes de variáveis.
        lookup (EnvLookup): Função nome → valor ou None.
        on_warning (Optional[EnvWarning]): Callback opcional de avisos.

    Returns:
        Dict[str, Any]: Caminhos sobrescritos → valores aplicados.
    """
    applied: Dict[str, Any] = {}

    def _warn(path: str, name: str, reason: str) -> None:
        if on_warning is not None:
            on_warning(path, name, reason)

    for path, current in all_settings(root).items():
        name = env_var_name(prefix, path)
        raw = lookup(name)
        if raw is None:
            continue

        found, node = resolve(root, path)
        if not found or isinstance(node, dict):
            _warn(path, name, "caminho não endereçável (chave contém '.')")
            continue

        try:
            value = coerce_env_value(raw, current)
        except EnvCoercionError as err:
            value = raw
            _warn(path, name, str(err))

        assign(root, path, value)
        applied[path] = value

    return applied
