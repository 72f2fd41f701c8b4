# src/hieracfg/core/config/errors.py
"""
Exceções canônicas da camada de configuração do hieracfg.

Este módulo define a hierarquia de exceções utilizadas durante a leitura
de documentos, o merge de árvores e a escrita por caminho pontuado.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Falhas de leitura de documento são sempre explícitas
    - Ausência de valor em leitura NUNCA é erro (retorna zero-value)

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Um load que falha nunca deixa árvore parcial no Config

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não registra eventos
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração.

    Permite captura genérica de qualquer falha da camada de config
    sem confundir com erros de execução do chamador.
    """


class ConfigParseError(ConfigError):
    """
    Exceção levantada quando o documento de entrada não pode ser interpretado.

    Encapsula o erro original do parser (PyYAML ou json) via encadeamento
    (`raise ... from err`).

    Invariantes:
        - O root do Config permanece inalterado após esta exceção
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato solicitado não é suportado.

    Formatos suportados (v1):
        - YAML ("yaml", "yml")
        - JSON ("json")

    Limites explícitos:
        - Não tenta inferir formato por conteúdo
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando a raiz do documento não é um mapa (`dict`).

    Listas ou escalares no root são inválidos: o Config sempre possui
    um Mapping como raiz.
    """


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando o merge recebe raízes que não são mapas.

    Conflitos de tipo entre folhas NÃO geram este erro: nesse caso o
    valor do destino prevalece.
    """


class UnsupportedValueTypeError(ConfigError):
    """
    Exceção levantada quando `set` recebe um valor fora do modelo de nós.

    Tipos aceitos: None, bool, int, float, str, list e dict
    (recursivamente).
    """


class EnvCoercionError(ConfigError):
    """Texto de variável de ambiente incompatível com o tipo da folha existente."""


class DuplicateKeyError(InvalidConfigRootTypeError):
    """
    Exceção levantada quando duas chaves de um mesmo mapa colidem após a
    normalização para texto (ex.: `1:` e `"1":`).

    Invariantes:
        - Nenhuma chave é descartada silenciosamente
    """
