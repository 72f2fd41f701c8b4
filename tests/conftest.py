# tests/conftest.py
"""
Fixtures compartilhados para testes do hieracfg.

Este módulo define documentos YAML mínimos e determinísticos usados
pelos testes do core de configuração, além do isolamento da instância
padrão compartilhada pelo processo.

Decisões arquiteturais:
    - Documentos fornecidos como string para evitar I/O
    - A instância padrão é descartada antes e depois de cada teste

Invariantes:
    - Nenhuma fixture acessa filesystem
    - Nenhuma fixture lê variáveis de ambiente reais
"""

import pytest


# =====================================================
# Documentos de exemplo
# =====================================================

@pytest.fixture
def example_yaml() -> str:
    """
    Documento completo com escalares, lista e mapas aninhados.

    Contém 9 folhas após o achatamento (a lista `hobbies` conta como
    uma única folha).
    """
    return """\
Hacker: true
name: steve
hobbies:
- skateboarding
- snowboarding
- go
clothing:
  jacket: leather
  trousers: denim
  pants:
    size: large
age: 35
eyes : brown
beard: true
"""


@pytest.fixture
def dst_yaml() -> str:
    """Documento primário do cenário de merge (seus valores prevalecem)."""
    return """\
Hacker: true
clothing:
  jacket: leather
  trousers: denim
"""


@pytest.fixture
def src_yaml() -> str:
    """Documento secundário do cenário de merge (preenche lacunas)."""
    return """\
Hacker: false
clothing:
  jacket: textile
  pants:
    size: large
"""


@pytest.fixture
def example_cfg(example_yaml):
    from hieracfg.core.config.store import Config

    cfg = Config()
    cfg.read_buffer(example_yaml)
    return cfg


# =====================================================
# Isolamento da instância padrão
# =====================================================

@pytest.fixture(autouse=True)
def _isolated_default_config():
    from hieracfg.core.config.default import reset_default

    reset_default()
    yield
    reset_default()
