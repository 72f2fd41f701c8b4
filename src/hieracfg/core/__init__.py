# src/hieracfg/core/__init__.py
"""
Core do hieracfg.

Componentes principais:
    - config → árvore de configuração, caminhos pontuados, merge,
               achatamento e sobrescrita via ambiente

O core opera apenas em memória: não lê arquivos, não acessa rede e
não depende de UI ou CLI.
"""
